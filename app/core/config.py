from pydantic_settings import BaseSettings
from pydantic import ConfigDict
from typing import List


class Settings(BaseSettings):
    model_config = ConfigDict(
        env_file=".env",
        extra="ignore"  # Ignore extra fields in .env
    )

    app_name: str = "File Manager API"
    app_version: str = "1.0.0"

    database_url: str = "sqlite:///./file_manager.db"
    db_connect_max_retries: int = 30
    db_connect_retry_delay: float = 2

    debug: bool = True

    host: str = "0.0.0.0"
    port: int = 8010

    cors_origins: List[str] = ["*"]

    default_page_size: int = 10
    stats_extension_limit: int = 10

    seed_sample_data: bool = False

settings = Settings()
