from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    institution_name: str = "FECAP"
    timezone: str = "America/Sao_Paulo"

    # X (Twitter) API v2 user-context credentials
    consumer_key: str = ""
    consumer_secret: str = ""
    access_token: str = ""
    access_token_secret: str = ""


settings = Settings()
