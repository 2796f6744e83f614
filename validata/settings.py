import os
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SCHEMA_DIR = os.path.join(os.path.dirname(__file__), "config")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="VALIDATA_", env_file=".env", extra="ignore")

    debug: bool = False
    log_json: bool = True
    file_support: bool = True  # host exposes bytes / file objects as uploads
    schema_dir: str = DEFAULT_SCHEMA_DIR


@lru_cache()
def get_settings() -> Settings:
    return Settings()
