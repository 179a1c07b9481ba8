from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    LINE_CHANNEL_SECRET: str | None = None
    LINE_CHANNEL_TOKEN: str | None = None
    LINE_API_BASE_URL: str = "https://api.line.me"

    TMDB_API_KEY: str | None = None
    TMDB_BASE_URL: str = "https://api.themoviedb.org/3"
    TMDB_IMAGE_BASE_URL: str = "https://image.tmdb.org/t/p/w500"
    TMDB_LANGUAGE: str = "th-TH"

    HTTP_TIMEOUT_SECONDS: float = 10.0
    SESSION_MAX_ENTRIES: int = 1000

    ENV: str = "prod"
    LOG_LEVEL: str = "INFO"
    PORT: int = 8080

    def is_local(self) -> bool:
        return self.ENV.lower() in {"dev", "local"}


settings = Settings()
