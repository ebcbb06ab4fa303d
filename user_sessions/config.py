from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    database_url: str = "postgresql://postgres:postgres@db:5432/de"
    database_echo: bool = False

    # Bare port ("60000") or listen address (":60000", "127.0.0.1:60000")
    listen_port: str = "60000"

    log_level: str = "INFO"


def get_settings(env_file: str | None = None) -> Settings:
    """Build settings, optionally from an explicit env file instead of .env."""
    if env_file:
        return Settings(_env_file=env_file)
    return Settings()


settings = Settings()
