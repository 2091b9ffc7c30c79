import os
from dataclasses import dataclass

# ✅ Database
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./content.db")

# ✅ Environment
APP_ENV = os.getenv("APP_ENV") or os.getenv("NODE_ENV") or "production"
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_DIR = os.getenv("LOG_DIR", "logs")

# ✅ Settings persistence
SETTINGS_FILE = os.getenv("SETTINGS_FILE", "settings.json")

# ✅ i18n
DEFAULT_LANGUAGE = os.getenv("DEFAULT_LANGUAGE", "en")


@dataclass(frozen=True)
class AppConfig:
    """Configuration resolved once at startup and passed to the components that need it."""
    database_url: str
    app_env: str
    log_level: str
    settings_file: str
    default_language: str
    log_dir: str = "logs"

    @property
    def is_development(self) -> bool:
        return self.app_env == "development"

    @classmethod
    def from_env(cls) -> "AppConfig":
        return cls(
            database_url=DATABASE_URL,
            app_env=APP_ENV,
            log_level=LOG_LEVEL,
            settings_file=SETTINGS_FILE,
            default_language=DEFAULT_LANGUAGE,
            log_dir=LOG_DIR,
        )
