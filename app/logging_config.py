import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from app.config import settings

CONSOLE_HANDLER = "app.console"
FILE_HANDLER = "app.file"


def setup_logging(level: Optional[str] = None, log_dir: Optional[Path] = None):
    """
    - Console + file (settings.LOG_DIR/app.log)
    - Rotate to avoid infinite growth
    - uvicorn access lines are muted, the request middleware in app.main logs every call
    """
    level = (level or settings.LOG_LEVEL).upper()
    log_dir = Path(log_dir or settings.LOG_DIR)

    root = logging.getLogger()
    root.setLevel(level)

    # Prevent duplicate handlers; other handlers (uvicorn, pytest) may already be on root
    if any(h.get_name() in (CONSOLE_HANDLER, FILE_HANDLER) for h in root.handlers):
        return

    log_dir.mkdir(parents=True, exist_ok=True)
    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console = logging.StreamHandler()
    console.set_name(CONSOLE_HANDLER)
    console.setLevel(level)
    console.setFormatter(formatter)

    file_handler = RotatingFileHandler(
        log_dir / "app.log",
        maxBytes=settings.LOG_MAX_BYTES,
        backupCount=settings.LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    file_handler.set_name(FILE_HANDLER)
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)

    root.addHandler(console)
    root.addHandler(file_handler)

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
