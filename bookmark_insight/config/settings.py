# 執行期設定：從 .env 與環境變數讀取

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

DEFAULT_FAVICON_SERVICE = "https://www.google.com/s2/favicons?domain={domain}"
DEFAULT_MAX_UPLOAD_BYTES = 10 * 1024 * 1024  # 10MB 上傳上限

# logger 尚未初始化，無效的設定值先記下來，由 logger_config 補寫警告
_invalid_entries: list[str] = []


@dataclass(frozen=True)
class Settings:
    log_dir: str = "logs"
    log_level: str = "DEBUG"
    favicon_service: str = DEFAULT_FAVICON_SERVICE
    max_upload_bytes: int = DEFAULT_MAX_UPLOAD_BYTES
    top_domains_limit: int = 10
    page_size: int = 10
    html_parser: str = "lxml"


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        _invalid_entries.append(f"{name}={raw!r}")
        return default
    if value < 1:
        _invalid_entries.append(f"{name}={raw!r}")
        return default
    return value


def load_settings() -> Settings:
    return Settings(
        log_dir=os.getenv("BOOKMARK_INSIGHT_LOG_DIR", "logs"),
        log_level=os.getenv("BOOKMARK_INSIGHT_LOG_LEVEL", "DEBUG").upper(),
        favicon_service=os.getenv("BOOKMARK_INSIGHT_FAVICON_SERVICE", DEFAULT_FAVICON_SERVICE),
        max_upload_bytes=_env_int("BOOKMARK_INSIGHT_MAX_UPLOAD_BYTES", DEFAULT_MAX_UPLOAD_BYTES),
        top_domains_limit=_env_int("BOOKMARK_INSIGHT_TOP_DOMAINS", 10),
        page_size=_env_int("BOOKMARK_INSIGHT_PAGE_SIZE", 10),
        html_parser=os.getenv("BOOKMARK_INSIGHT_HTML_PARSER", "lxml"),
    )


def invalid_entries() -> tuple[str, ...]:
    return tuple(_invalid_entries)


settings = load_settings()
