from pathlib import Path
from pydantic_settings import BaseSettings

BASE_DIR = Path(__file__).resolve().parents[2]

class Settings(BaseSettings):
    PROJECT_NAME: str = "Tax Config Server"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    LOG_LEVEL: str = "INFO"

    # Storage
    PUBLIC_DIR: Path = BASE_DIR / "public"
    CONFIG_FILE: Path = BASE_DIR / "config.json"

    class Config:
        case_sensitive = True

settings = Settings()
