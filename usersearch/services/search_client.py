"""Client for the remote user search service."""

from __future__ import annotations

import json
import time
from typing import Callable, Dict, List

import httpx
from pydantic import TypeAdapter, ValidationError

from ..config import SearchClientConfig
from ..errors import (
    BadAccessTokenError,
    BadRequestError,
    OrderFieldError,
    ResponseDecodeError,
    SearchClientError,
    SearchValidationError,
    TransportError,
    UnexpectedStatusError,
)
from ..logging import logger
from ..metrics import client_latency, client_requests, search_results_returned
from ..schemas import (
    ACCESS_TOKEN_HEADER,
    ERROR_BAD_ORDER_FIELD,
    MAX_LIMIT,
    SearchErrorResponse,
    SearchRequest,
    SearchResponse,
    User,
)

_users_adapter = TypeAdapter(List[User])


def overfetch_limit(limit: int) -> int:
    """Ask for one record more than needed so the next page can be detected."""
    if limit > MAX_LIMIT:
        return MAX_LIMIT
    return limit + 1


def encode_params(request: SearchRequest) -> Dict[str, str]:
    return {
        "limit": str(overfetch_limit(request.limit)),
        "offset": str(request.offset),
        "query": request.query,
        "order_field": request.order_field,
        "order_by": str(request.order_by),
    }


def _decode_users(body: bytes) -> List[User]:
    try:
        return _users_adapter.validate_json(body)
    except ValidationError as exc:
        raise ResponseDecodeError(f"cant unpack result json: {exc}") from exc


def _bad_access_token(body: bytes) -> List[User]:
    raise BadAccessTokenError()


def _bad_request(body: bytes) -> List[User]:
    try:
        payload = SearchErrorResponse.model_validate_json(body)
    except ValidationError as exc:
        raise BadRequestError(f"cant unpack error json: {exc}") from exc
    if payload.error == ERROR_BAD_ORDER_FIELD:
        raise OrderFieldError()
    raise BadRequestError(payload.error)


_STATUS_HANDLERS: Dict[int, Callable[[bytes], List[User]]] = {
    200: _decode_users,
    400: _bad_request,
    401: _bad_access_token,
}


def classify_response(status_code: int, body: bytes) -> List[User]:
    """Map a service reply to the decoded users or the matching error.

    Every status without an entry in the table is reported as an
    UnexpectedStatusError and its body is not looked at.
    """
    handler = _STATUS_HANDLERS.get(status_code)
    if handler is None:
        raise UnexpectedStatusError(status_code)
    return handler(body)


def paginate(users: List[User], request: SearchRequest) -> SearchResponse:
    if len(users) == overfetch_limit(request.limit):
        return SearchResponse(users=users[: request.limit], next_page=True)
    return SearchResponse(users=users, next_page=False)


class SearchClient:
    """Runs searches against one configured service endpoint.

    When no ``http_client`` is passed a fresh ``httpx.AsyncClient`` is opened
    for every call, using ``config.timeout_seconds`` as its deadline.
    """

    def __init__(
        self,
        config: SearchClientConfig,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.config = config
        self._client = http_client

    async def find_users(self, request: SearchRequest) -> SearchResponse:
        if request.limit < 0:
            raise SearchValidationError("limit", request.limit)
        if request.offset < 0:
            raise SearchValidationError("offset", request.offset)

        params = encode_params(request)
        logger.debug(
            "user_search_request",
            url=self.config.search_url,
            limit=params["limit"],
            offset=request.offset,
            order_field=request.order_field,
            order_by=request.order_by,
        )

        start_time = time.time()
        try:
            response = await self._get(params)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            client_requests.labels(outcome="transport_error").inc()
            logger.warning("user_search_transport_failed", url=self.config.search_url, error=str(exc))
            raise TransportError(f"unknown error: {exc}") from exc
        finally:
            client_latency.observe(time.time() - start_time)

        try:
            try:
                users = classify_response(response.status_code, response.content)
            except OrderFieldError as exc:
                raise OrderFieldError(request.order_field) from exc
        except SearchClientError as exc:
            client_requests.labels(outcome=type(exc).__name__).inc()
            logger.warning(
                "user_search_failed",
                status_code=response.status_code,
                error_type=type(exc).__name__,
                error=str(exc),
            )
            raise

        result = paginate(users, request)
        client_requests.labels(outcome="ok").inc()
        search_results_returned.labels(source="client").observe(len(result.users))
        return result

    async def _get(self, params: Dict[str, str]) -> httpx.Response:
        headers = {ACCESS_TOKEN_HEADER: self.config.access_token}
        if self._client is not None:
            return await self._client.get(self.config.search_url, params=params, headers=headers)
        async with httpx.AsyncClient(timeout=self.config.timeout_seconds) as client:
            return await client.get(self.config.search_url, params=params, headers=headers)


__all__ = [
    "SearchClient",
    "classify_response",
    "encode_params",
    "overfetch_limit",
    "paginate",
]
