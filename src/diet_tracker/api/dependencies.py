"""Request-scoped dependencies shared by the routers."""

from typing import Annotated
from uuid import UUID

from fastapi import Depends, Header, Query, Request

from diet_tracker.containers import AppContainer
from diet_tracker.domain.pages import FIRST_PAGE_NUM


def get_container(request: Request) -> AppContainer:
    return request.app.state.container


def get_caller_id(x_user_id: Annotated[UUID, Header()]) -> UUID:
    """Return the authenticated caller id set by the upstream auth layer."""
    return x_user_id


class PageParams:
    """Page number and size query parameters."""

    def __init__(
        self,
        container: Annotated[AppContainer, Depends(get_container)],
        page: Annotated[int, Query(ge=0)] = FIRST_PAGE_NUM,
        size: Annotated[int | None, Query(ge=1)] = None,
    ) -> None:
        self.page = page
        self.size = size or container.settings.default_page_size


Container = Annotated[AppContainer, Depends(get_container)]
CallerId = Annotated[UUID, Depends(get_caller_id)]
Paging = Annotated[PageParams, Depends()]
