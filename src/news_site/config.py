"""Configuration loader for the news site."""

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from common.config import ConfigSingleton, env_str, find_config_path, load_yaml

load_dotenv()

CONFIG_ENV_VAR = "NEWS_SITE_CONFIG"


@dataclass
class ServerConfig:
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False


@dataclass
class SiteInfo:
    name: str = "NTR"
    tagline: str = "News Trends and Reports"
    description: str = (
        "Your destination for the latest news, trends and reports. "
        "In-depth coverage on culture, tech, entertainment, and more."
    )
    url: str = "https://ntr.example.com"


@dataclass
class AdminConfig:
    email: str | None = None
    password: str | None = None
    secure_cookie: bool = True

    @property
    def is_configured(self) -> bool:
        return bool(self.email and self.password)


@dataclass
class DatabaseConfig:
    url: str | None = None
    init_schema: bool = True


@dataclass
class SiteConfig:
    site: SiteInfo = field(default_factory=SiteInfo)
    server: ServerConfig = field(default_factory=ServerConfig)
    admin: AdminConfig = field(default_factory=AdminConfig)
    database: DatabaseConfig = field(default_factory=DatabaseConfig)
    page_size: int = 12


def load_config(config_name: str | None = None) -> SiteConfig:
    """Load configuration from YAML, then overlay secrets from the environment.

    Args:
        config_name: Name of config file (without .yaml extension). Defaults
            to $NEWS_SITE_CONFIG, then "prod".

    Returns:
        SiteConfig instance
    """
    raw = load_yaml(find_config_path(config_name, env_var=CONFIG_ENV_VAR))

    site_raw = raw.get("site", {})
    site = SiteInfo(
        name=site_raw.get("name", SiteInfo.name),
        tagline=site_raw.get("tagline", SiteInfo.tagline),
        description=site_raw.get("description", SiteInfo.description),
        url=env_str("SITE_URL", site_raw.get("url", SiteInfo.url)).rstrip("/"),
    )

    server_raw = raw.get("server", {})
    server = ServerConfig(
        host=server_raw.get("host", "0.0.0.0"),
        port=int(server_raw.get("port", 8000)),
        reload=bool(server_raw.get("reload", False)),
    )

    admin_raw = raw.get("admin", {})
    admin_email = env_str("ADMIN_EMAIL")
    admin = AdminConfig(
        email=admin_email.strip() if admin_email else None,
        # Compared verbatim, never stripped.
        password=os.environ.get("ADMIN_PASSWORD") or None,
        secure_cookie=bool(admin_raw.get("secure_cookie", True)),
    )

    database_raw = raw.get("database", {})
    database = DatabaseConfig(
        url=env_str("DATABASE_URL", database_raw.get("url")),
        init_schema=bool(database_raw.get("init_schema", True)),
    )

    return SiteConfig(
        site=site,
        server=server,
        admin=admin,
        database=database,
        page_size=int(raw.get("page_size", 12)),
    )


_manager: ConfigSingleton[SiteConfig] = ConfigSingleton(load_config)
get_config = _manager.get
set_config = _manager.set
reset_config = _manager.reset
