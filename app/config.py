from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

load_dotenv()


class Settings(BaseSettings):
    # Application settings
    app_name: str = "Desce o Machado"
    app_version: str = "2.0.0"
    debug: bool = False
    environment: str = "development"

    # Public origin used for canonical and hreflang URLs
    base_url: str = "https://blog.odeciomachado.com"

    # Locale settings
    default_language: str = "en"
    supported_languages: list[str] = ["en", "pt"]
    preference_cookie_name: str = "preferredLanguage"
    timezone: str = "America/Sao_Paulo"

    # Logging settings
    log_level: str = "INFO"
    json_logs: bool = True

    # CORS settings
    allowed_origins: list[str] = ["http://localhost:4321", "http://localhost:8000"]

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


settings = Settings()
