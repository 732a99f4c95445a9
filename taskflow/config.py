from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_env: str = "dev"
    timezone: str = "UTC"  # IANA name; "now" for each request is captured here
    urgent_window_hours: int = 24
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", env_prefix="", case_sensitive=False)


settings = Settings()
