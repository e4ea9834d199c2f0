# src/core/services/file_service.py
import logging
import os
import uuid
from dataclasses import dataclass
from pathlib import Path
from typing import List

from src.core.config import settings
from src.core.exceptions import FileWriteException, ValidationException

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StoredFile:
    filename: str
    filepath: str


class FileStorage:
    """Writes uploaded files into a local directory under generated names."""

    def __init__(
        self,
        upload_dir: str = settings.UPLOAD_FOLDER,
        url_prefix: str = settings.FILES_URL_PREFIX,
    ):
        self.upload_dir = Path(upload_dir)
        self.url_prefix = url_prefix.rstrip("/")

    def ensure_directory(self) -> None:
        self.upload_dir.mkdir(parents=True, exist_ok=True)

    @staticmethod
    def clean_filename(original_name: str) -> str:
        """Keep only the last path component of a client supplied name."""
        name = original_name.replace("\\", "/").split("/")[-1].strip()
        if name in ("", ".", "..") or any(ord(ch) < 32 or ch == "\x7f" for ch in name):
            raise ValidationException(f"Invalid file name: {original_name!r}")
        return name

    def build_filename(self, original_name: str) -> str:
        return f"{uuid.uuid4()}_{self.clean_filename(original_name)}"

    def public_path(self, filename: str) -> str:
        return f"{self.url_prefix}/{filename}"

    def save(self, original_name: str, data: bytes) -> StoredFile:
        filename = self.build_filename(original_name)
        target = self.upload_dir / filename
        try:
            with open(target, "wb") as out_file:
                out_file.write(data)
        except (OSError, ValueError) as e:
            logger.error(f"Failed to save file {target}: {e}")
            raise FileWriteException(f"Failed to save file: {e}") from e

        logger.info(f"Saved file at {target} ({len(data)} bytes)")
        return StoredFile(filename=filename, filepath=self.public_path(filename))

    def delete(self, filename: str) -> bool:
        target = self.upload_dir / self.clean_filename(filename)
        try:
            os.remove(target)
        except FileNotFoundError:
            return False
        logger.info(f"Deleted file {target}")
        return True

    def list_files(self) -> List[str]:
        if not self.upload_dir.is_dir():
            return []
        return sorted(p.name for p in self.upload_dir.iterdir() if p.is_file())
