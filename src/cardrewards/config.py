from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CATALOG_FILE = Path(__file__).parent / "data" / "card_catalog.json"


class Settings(BaseSettings):
    card_catalog_file: str = str(DEFAULT_CATALOG_FILE)
    point_value: float = 0.01
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
