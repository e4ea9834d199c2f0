"""Post schemas."""

from pydantic import BaseModel


class PostForm(BaseModel):
    """Fields a user may submit when writing or editing a post.

    The attachment's stored name and public path are never accepted from
    the client; they are produced by the write path.
    """

    title: str
    content: str
