from functools import lru_cache

from pydantic import AnyUrl
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    indodax_base_url: AnyUrl = "https://indodax.com"
    request_timeout_seconds: float | None = None
    log_level: str = "WARNING"
    clear_delay_seconds: float = 1.0
    use_color: bool = True

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


@lru_cache
def get_settings() -> Settings:
    return Settings()
