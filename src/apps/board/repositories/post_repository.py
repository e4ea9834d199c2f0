"""Post repository."""

from typing import Optional

from sqlmodel import col

from src.core.bases.base_repository import BaseRepository
from src.core.response.schemas import Page, PageRequest
from src.apps.board.models.post import Post


class PostRepository(BaseRepository[Post]):
    """Post repository class."""

    model = Post

    async def insert_or_update(self, post: Post) -> Post:
        return await self.save(post)

    async def find_by_id(self, post_id: int) -> Optional[Post]:
        return await self.get(post_id)

    async def delete_by_id(self, post_id: int) -> bool:
        return await self.delete(post_id)

    async def list_page(self, page_request: PageRequest) -> Page[Post]:
        return await self.list(page_request)

    async def search_by_title_page(
        self, keyword: str, page_request: PageRequest
    ) -> Page[Post]:
        """Posts whose title contains keyword, ignoring case."""
        condition = col(Post.title).icontains(keyword, autoescape=True)
        return await self.list(page_request, condition)
