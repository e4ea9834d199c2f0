import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


class EnvManager:
    """Read settings defaults from the process environment (and `.env`)."""

    @staticmethod
    def get_env_variable(name: str, default: Optional[str] = None) -> str:
        value = os.getenv(name)
        if value is None or value == "":
            return default  # type: ignore
        return value

    @staticmethod
    def get_int_env_variable(name: str, default: int) -> int:
        value = os.getenv(name)
        if not value:
            return default
        try:
            return int(value)
        except ValueError:
            return default
