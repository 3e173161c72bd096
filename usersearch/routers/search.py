import os
from functools import lru_cache

from fastapi import APIRouter, Depends, Header
from fastapi.responses import JSONResponse
from starlette.responses import Response

from ..logging import logger
from ..metrics import search_results_returned
from ..schemas import ERROR_BAD_ORDER_FIELD, SearchErrorResponse
from ..services.user_store import UnknownOrderBy, UnknownOrderField, UserStore, load_store

router = APIRouter(prefix="/search", tags=["Search"])


@lru_cache
def get_store() -> UserStore:
    return load_store()


def get_access_token() -> str:
    return os.getenv("USER_SEARCH_ACCESS_TOKEN", "")


def _error(code: str) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content=SearchErrorResponse(error=code).model_dump(by_alias=True),
    )


@router.get(
    "",
    summary="Search users",
    responses={
        400: {"model": SearchErrorResponse, "description": "Bad search parameters"},
        401: {"description": "Bad access token"},
    },
)
def search_users(
    limit: int = 0,
    offset: int = 0,
    query: str = "",
    order_field: str = "",
    order_by: int = 0,
    access_token: str | None = Header(default=None, alias="AccessToken"),
    expected_token: str = Depends(get_access_token),
    store: UserStore = Depends(get_store),
):
    if access_token != expected_token:
        return Response(status_code=401)
    if limit < 0:
        return _error("ErrorBadLimit")
    if offset < 0:
        return _error("ErrorBadOffset")

    try:
        users = store.search(
            query=query,
            order_field=order_field,
            order_by=order_by,
            offset=offset,
            limit=limit,
        )
    except UnknownOrderField:
        logger.info("search_bad_order_field", order_field=order_field)
        return _error(ERROR_BAD_ORDER_FIELD)
    except UnknownOrderBy:
        return _error("ErrorBadOrderBy")

    search_results_returned.labels(source="service").observe(len(users))
    return JSONResponse(content=[u.model_dump(by_alias=True) for u in users])
