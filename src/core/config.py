import os

from pydantic_settings import BaseSettings

from src.core.env_manager import EnvManager

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


class Settings(BaseSettings):
    DATABASE_URI: str = EnvManager.get_env_variable(
        "DATABASE_URL", "sqlite:///database.db"
    )
    ASYNC_DATABASE_URL: str = EnvManager.get_env_variable(
        "ASYNC_DATABASE_URL", "sqlite+aiosqlite:///database.db"
    )

    PROJECT_NAME: str = EnvManager.get_env_variable("PROJECT_NAME", "Board")
    PROJECT_INFO: str = EnvManager.get_env_variable(
        "PROJECT_INFO", "Simple bulletin board with file attachments"
    )
    PROJECT_VERSION: str = EnvManager.get_env_variable("PROJECT_VERSION", "1.0.0")

    UPLOAD_FOLDER: str = EnvManager.get_env_variable("UPLOAD_FOLDER", "uploads")
    FILES_URL_PREFIX: str = EnvManager.get_env_variable("FILES_URL_PREFIX", "/files")
    TEMPLATES_DIR: str = EnvManager.get_env_variable(
        "TEMPLATES_DIR", os.path.join(BASE_DIR, "templates")
    )

    PAGE_SIZE: int = EnvManager.get_int_env_variable("PAGE_SIZE", 10)
    MAX_PAGE_SIZE: int = EnvManager.get_int_env_variable("MAX_PAGE_SIZE", 100)

    LOG_LEVEL: str = EnvManager.get_env_variable("LOG_LEVEL", "INFO")
    HOST: str = EnvManager.get_env_variable("HOST", "0.0.0.0")
    PORT: int = EnvManager.get_int_env_variable("PORT", 8000)


settings = Settings()
