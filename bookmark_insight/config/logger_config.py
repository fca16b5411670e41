from pathlib import Path

from loguru import logger

from bookmark_insight.config.settings import invalid_entries, settings

log_dir = Path(settings.log_dir)
log_file = log_dir / "bookmark_insight_{time}.log"

logger.remove()
logger.add(
    log_file,
    rotation="256 MB",  # 每個檔案滿 256MB 就切分
    retention="10 days",  # 只保留最近 10 天的日誌 (自動刪除舊的)
    compression="zip",  # 切分後的舊檔案自動壓縮成 zip (節省空間)
    encoding="utf-8",  # 防止中文亂碼
    level=settings.log_level,
)

for entry in invalid_entries():
    logger.warning("Invalid integer setting ignored, default used: {}", entry)
