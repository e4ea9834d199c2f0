"""Post router."""

from typing import Optional

from fastapi import Depends, File, Form, Query, Request, UploadFile

from src.core.bases.base_router import BaseRouter
from src.core.config import settings
from src.core.exceptions import ValidationException
from src.core.response.handlers import redirect, render
from src.core.response.schemas import PageRequest
from src.core.utils.utils import page_window
from src.apps.board.models.post import Post
from src.apps.board.schemas.post import PostForm
from src.apps.board.services.post_service import BoardService

LIST_URL = "/board/list"


def get_board_service(request: Request) -> BoardService:
    """Get the board service wired up at application startup."""
    return request.app.state.board_service


def get_page_request(
    page: int = Query(0, ge=0, description="Zero-based page index"),
    size: int = Query(
        settings.PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE, description="Items per page"
    ),
    sort: str = Query("id,desc", description="Sort as 'field,direction'"),
) -> PageRequest:
    """Build a PageRequest from Spring style page/size/sort parameters."""
    field, _, direction = sort.partition(",")
    field = field.strip() or "id"
    direction = (direction.strip() or "desc").lower()
    if direction not in ("asc", "desc"):
        raise ValidationException(f"Unknown sort direction '{direction}'")
    return PageRequest(page=page, size=size, sort_field=field, sort_direction=direction)


class BoardRouter(BaseRouter):
    """Board pages: write, list/search, view, modify, update and delete."""

    def __init__(self):
        super().__init__(prefix="/board", tags=["Board"])

    def _register_routes(self) -> None:
        self._register_write()
        self._register_list()
        self._register_view()
        self._register_delete()
        self._register_modify()

    def _register_write(self) -> None:
        @self.router.get("/write", summary="Post creation form")
        async def board_write_form(request: Request):
            return render(request, "boardwrite.html")

        @self.router.post("/writepro", summary="Create a post")
        async def board_write_pro(
            request: Request,
            title: str = Form(...),
            content: str = Form(...),
            file: Optional[UploadFile] = File(None),
            service: BoardService = Depends(get_board_service),
        ):
            await service.write(Post(title=title, content=content), file)
            return render(
                request,
                "message.html",
                {"message": "Post created.", "search_url": LIST_URL},
            )

    def _register_list(self) -> None:
        @self.router.get("/list", summary="List or search posts")
        async def board_list(
            request: Request,
            page_request: PageRequest = Depends(get_page_request),
            search_keyword: Optional[str] = Query(None, alias="searchKeyword"),
            service: BoardService = Depends(get_board_service),
        ):
            if not search_keyword:
                page = await service.board_list(page_request)
            else:
                page = await service.board_search_list(search_keyword, page_request)

            now_page = page.page + 1
            start_page, end_page = page_window(now_page, page.total_pages)

            return render(
                request,
                "boardlist.html",
                {
                    "page": page,
                    "now_page": now_page,
                    "start_page": start_page,
                    "end_page": end_page,
                    "search_keyword": search_keyword or "",
                    "sort": f"{page_request.sort_field},{page_request.sort_direction}",
                },
            )

    def _register_view(self) -> None:
        @self.router.get("/view", summary="Show a post")
        async def board_view(
            request: Request,
            post_id: int = Query(..., alias="id"),
            service: BoardService = Depends(get_board_service),
        ):
            board = await service.board_view(post_id)
            return render(request, "boardview.html", {"board": board})

    def _register_delete(self) -> None:
        @self.router.api_route("/delete", methods=["GET", "POST"], summary="Delete a post")
        async def board_delete(
            post_id: int = Query(..., alias="id"),
            service: BoardService = Depends(get_board_service),
        ):
            await service.board_delete(post_id)
            return redirect(LIST_URL)

    def _register_modify(self) -> None:
        @self.router.get("/modify/{post_id}", summary="Post edit form")
        async def board_modify(
            request: Request,
            post_id: int,
            service: BoardService = Depends(get_board_service),
        ):
            board = await service.board_view(post_id)
            return render(request, "boardmodify.html", {"board": board})

        @self.router.post("/update/{post_id}", summary="Update a post")
        async def board_update(
            request: Request,
            post_id: int,
            title: str = Form(...),
            content: str = Form(...),
            file: Optional[UploadFile] = File(None),
            service: BoardService = Depends(get_board_service),
        ):
            await service.board_update(
                post_id, PostForm(title=title, content=content), file
            )
            return render(
                request,
                "message.html",
                {"message": "Post updated.", "search_url": LIST_URL},
            )


# Router instance
router = BoardRouter().get_router()
