"""Post model."""

from typing import Optional

from sqlmodel import Field
from src.core.database import BaseModel


class Post(BaseModel, table=True):
    """A single board entry with an optional attached file."""

    __tablename__ = "board"  # type: ignore
    title: str = Field()
    content: str = Field()
    filename: Optional[str] = Field(default=None)
    filepath: Optional[str] = Field(default=None)

    @property
    def has_attachment(self) -> bool:
        return bool(self.filename)
