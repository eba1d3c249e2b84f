"""Application configuration via environment variables."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "fraud-risk-engine"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    log_format: str = "json"

    model_version: str = "heuristic-v1"

    model_config = {
        "env_prefix": "",
        "env_file": ".env",
        "extra": "ignore",
        "protected_namespaces": (),
    }


settings = Settings()
