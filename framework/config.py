from urllib.parse import quote_plus
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # --- Basic configuration ---
    APP_NAME: str = "Employee Directory"
    APP_DESCRIPTION: str = "Employee records store with CRUD and last-name search"
    APP_VERSION: str = "1.0.0"
    APP_ENV: str = "development"  # development, production, testing
    DEBUG: bool = True

    # --- Database (SQLModel over async SQLAlchemy) ---
    DB_DRIVER: str = "mysql+aiomysql"  # or sqlite+aiosqlite
    DB_HOST: str = "localhost"
    DB_PORT: int = 3306
    DB_USER: str = "root"
    DB_PASSWORD: str = "root"
    DB_NAME: str = "app_db"  # database name, or file path for SQLite
    DB_ECHO: bool = False

    @property
    def DATABASE_URL(self) -> str:
        if self.DB_DRIVER.startswith("sqlite"):
            return f"{self.DB_DRIVER}:///{self.DB_NAME}"
        # Build async server connection URL
        safe_password = quote_plus(self.DB_PASSWORD)
        return f"{self.DB_DRIVER}://{self.DB_USER}:{safe_password}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"

    # --- Employee search ---
    # LIKE is case-insensitive on MySQL/SQLite default collations; re-check matches in Python
    EMPLOYEE_SEARCH_CASE_SENSITIVE: bool = True

    # --- Logging ---
    LOG_DIR: str = "logs"
    LOG_LEVEL: str = "INFO"

    # --- Pydantic ---
    # Load env from project root .env; priority: env vars > .env > defaults
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_ignore_empty=True,
    )


# Singleton settings instance
settings = Settings()
