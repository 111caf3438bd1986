"""Tests for common.local_io and common.aws JSONL export."""

import json
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from common import aws
from common.local_io import save_jsonl_records_local


@dataclass
class Outcome:
    category: str
    slug: str | None = None


class TestSaveJsonlRecordsLocal:
    def test_writes_one_line_per_record(self, tmp_path: Path) -> None:
        now = datetime(2026, 3, 1, 9, 5, tzinfo=timezone.utc)
        path = save_jsonl_records_local(
            [Outcome("TV", "a"), Outcome("Tech")],
            "publish_reports",
            output_dir=str(tmp_path),
            now=now,
        )

        assert path.name == "publish_reports_2026_03_01_09_05.jsonl"
        lines = path.read_text().splitlines()
        assert [json.loads(line) for line in lines] == [
            {"category": "TV", "slug": "a"},
            {"category": "Tech", "slug": None},
        ]


class TestBuildS3Key:
    def test_partitioned_key(self) -> None:
        ts = datetime(2026, 2, 5, tzinfo=timezone.utc)
        assert aws.build_s3_key("publish_reports", ts, "f.jsonl") == (
            "publish_reports/year=2026/month=02/day=05/f.jsonl"
        )


class TestUploadJsonlRecordsToS3:
    def test_puts_jsonl_object(self, monkeypatch: pytest.MonkeyPatch) -> None:
        client = MagicMock()
        monkeypatch.setattr(aws, "get_s3_client", lambda: client)
        monkeypatch.setenv("S3_BUCKET_NAME", "bucket")

        key = aws.upload_jsonl_records_to_s3([Outcome("TV", "a")], "publish_reports")

        assert key.startswith("publish_reports/year=")
        kwargs = client.put_object.call_args.kwargs
        assert kwargs["Bucket"] == "bucket"
        assert kwargs["Key"] == key
        assert json.loads(kwargs["Body"].decode("utf-8")) == {"category": "TV", "slug": "a"}
