"""
Configuration de l'application / Application configuration.
Utilise pydantic-settings pour charger depuis .env ou variables d'environnement.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Application
    APP_NAME: str = "Gasoil Manager"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = True

    # Database - SQLite par défaut pour le développement
    # Database - SQLite by default for development
    DATABASE_URL: str = "sqlite+aiosqlite:///./gasoil.db"

    # CORS - origines autorisées / allowed origins
    CORS_ORIGINS: list[str] = ["http://localhost:3000", "http://localhost:5500", "http://127.0.0.1:5500"]

    # Rate Limiting
    RATE_LIMIT_DEFAULT: str = "120/minute"

    # Build du frontend (SPA) / Frontend build directory (SPA)
    STATIC_DIR: str = "./frontend"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
