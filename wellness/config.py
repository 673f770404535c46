from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Logging goes to stderr; stdout is reserved for the prompts and the report.
    log_level: str = "WARNING"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    model_config = {"env_prefix": "WELLNESS_", "env_file": ".env", "extra": "ignore"}


settings = Settings()
