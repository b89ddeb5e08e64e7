from typing import List

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # --- DB 設定 ---
    DATABASE_URL: str = "sqlite:///./courses.db"

    # --- 課表設定 ---
    SCHEDULE_MIN_START_TIME: int = 7
    SCHEDULE_MAX_END_TIME: int = 19
    # one colour per selectable course, so this also caps the selection size
    COURSE_COLORS: List[str] = ["green", "red", "blue", "yellow", "purple"]

    # --- Log 設定 ---
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"
    LOG_MAX_BYTES: int = 5 * 1024 * 1024
    LOG_BACKUP_COUNT: int = 5

    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    # 設定檔配置
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True
    )

    @model_validator(mode="after")
    def _validate_schedule(self):
        lo, hi = self.SCHEDULE_MIN_START_TIME, self.SCHEDULE_MAX_END_TIME
        if not (0 <= lo < hi <= 24):
            raise ValueError("need 0 <= SCHEDULE_MIN_START_TIME < SCHEDULE_MAX_END_TIME <= 24")
        if not self.COURSE_COLORS:
            raise ValueError("COURSE_COLORS cannot be empty")
        return self

    @property
    def max_selected_courses(self) -> int:
        return len(self.COURSE_COLORS)

settings = Settings()
