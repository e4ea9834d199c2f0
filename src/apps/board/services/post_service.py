"""Post service."""

import logging
from typing import Optional

from fastapi import UploadFile

from src.core import exceptions
from src.core.bases.base_repository import RepositoryError
from src.core.bases.base_service import BaseService
from src.core.response.schemas import ErrorDetail, Page, PageRequest
from src.core.services.file_service import FileStorage
from src.apps.board.models.post import Post
from src.apps.board.repositories.post_repository import PostRepository
from src.apps.board.schemas.post import PostForm

logger = logging.getLogger(__name__)


def has_upload(upload: Optional[UploadFile]) -> bool:
    """True when the request carried a real file part."""
    return upload is not None and bool(upload.filename)


class BoardService(BaseService[Post]):
    """Post service class."""

    repository: PostRepository

    def __init__(self, repository: PostRepository, storage: FileStorage):
        super().__init__(repository)
        self.storage = storage

    def _validate_write(self, post: Post) -> None:
        errors = [
            ErrorDetail(field=name, code="REQUIRED", message=f"{name} must not be blank")
            for name in ("title", "content")
            if not (getattr(post, name) or "").strip()
        ]
        if errors:
            raise exceptions.ValidationException(
                "Title and content are required", error_details=errors
            )

    async def write(self, post: Post, upload: Optional[UploadFile] = None) -> Post:
        """Store the attachment (when one was sent), then persist the post.

        Without a file part the existing filename/filepath are left as they
        are, so editing a post without re-uploading keeps its attachment.
        """
        self._validate_write(post)

        if has_upload(upload):
            data = await upload.read()  # type: ignore[union-attr]
            stored = self.storage.save(upload.filename, data)  # type: ignore[union-attr, arg-type]
            post.filename = stored.filename
            post.filepath = stored.filepath

        saved = await self.save(post)
        logger.info(f"Saved post {saved.id} (attachment={saved.filename})")
        return saved

    async def board_list(self, page_request: PageRequest) -> Page[Post]:
        self._check_sort(page_request)
        try:
            return await self.repository.list_page(page_request)
        except RepositoryError as e:
            raise self._service_error(e, "list") from e

    async def board_view(self, post_id: int) -> Post:
        return await self.get_by_id(post_id)

    async def board_search_list(
        self, keyword: str, page_request: PageRequest
    ) -> Page[Post]:
        self._check_sort(page_request)
        try:
            return await self.repository.search_by_title_page(keyword, page_request)
        except RepositoryError as e:
            raise self._service_error(e, "search") from e

    async def board_delete(self, post_id: int) -> bool:
        deleted = await self.delete(post_id)
        if deleted:
            logger.info(f"Deleted post {post_id}")
        else:
            logger.info(f"Delete of missing post {post_id} ignored")
        return deleted

    async def board_update(
        self, post_id: int, form: PostForm, upload: Optional[UploadFile] = None
    ) -> Post:
        post = await self.board_view(post_id)
        post.title = form.title
        post.content = form.content
        return await self.write(post, upload)
