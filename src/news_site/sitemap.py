"""XML sitemap for the site root, category listings and articles."""

from __future__ import annotations

from datetime import datetime, timezone

from lxml import etree

from article_store.models import Article, Category

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"


def _add_url(
    urlset: etree._Element,
    loc: str,
    lastmod: datetime,
    changefreq: str,
    priority: float,
) -> None:
    url = etree.SubElement(urlset, f"{{{SITEMAP_NS}}}url")
    etree.SubElement(url, f"{{{SITEMAP_NS}}}loc").text = loc
    etree.SubElement(url, f"{{{SITEMAP_NS}}}lastmod").text = lastmod.date().isoformat()
    etree.SubElement(url, f"{{{SITEMAP_NS}}}changefreq").text = changefreq
    etree.SubElement(url, f"{{{SITEMAP_NS}}}priority").text = f"{priority:.1f}"


def build_sitemap(
    site_url: str,
    categories: list[Category],
    articles: list[Article],
    now: datetime | None = None,
) -> bytes:
    """Render the sitemap document. Articles sharing a slug are listed once."""
    now = now or datetime.now(timezone.utc)
    base = site_url.rstrip("/")

    urlset = etree.Element(f"{{{SITEMAP_NS}}}urlset", nsmap={None: SITEMAP_NS})
    _add_url(urlset, base, now, "daily", 1.0)

    for category in categories:
        _add_url(urlset, f"{base}/articles?category={category.slug}", now, "daily", 0.9)

    seen: set[str] = set()
    for article in articles:
        if article.slug in seen:
            continue
        seen.add(article.slug)
        _add_url(urlset, f"{base}/article/{article.slug}", article.published_at, "weekly", 0.8)

    return etree.tostring(urlset, xml_declaration=True, encoding="UTF-8", pretty_print=True)
