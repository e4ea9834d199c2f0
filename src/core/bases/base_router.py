from typing import Callable, List, Optional

from fastapi import APIRouter


class BaseRouter:
    """Base router class; subclasses register their routes on self.router."""

    def __init__(
        self,
        tags: Optional[List[str]] = None,
        prefix: str = "",
        dependencies: Optional[List[Callable]] = None,
    ):
        self.tags = tags or [self.__class__.__name__.replace("Router", "")]
        self.prefix = prefix

        # Create router
        self.router = APIRouter(
            prefix=self.prefix,
            tags=self.tags,  # type:ignore
            dependencies=dependencies or [],  # type:ignore
        )

        # Register routes
        self._register_routes()

    def _register_routes(self) -> None:
        raise NotImplementedError

    def get_router(self) -> APIRouter:
        """Get the FastAPI router instance."""
        return self.router
