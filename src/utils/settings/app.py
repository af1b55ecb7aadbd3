from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore", frozen=True)

    ENVIRONMENT: str = "DEV"
    LOG_LEVEL: str = "INFO"
    API_VERSION: str = "0.1.0"
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    CORS_ORIGINS: list[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://127.0.0.1:3000",
    ]

    # Session cookie settings
    COOKIE_SECURE: bool = False

    # Outbound requests to the key and image services
    HTTP_TIMEOUT_SECONDS: int = 60

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.upper() == "PROD"
