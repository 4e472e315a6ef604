"""Description of a single API request, built step by step."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Mapping


class HttpMethod(str, Enum):
    """HTTP request methods."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ApiRequest:
    """A request: method, path, headers, query parameters and optional body.

    The ``with_*`` methods return a new request and leave this one unchanged.
    """

    method: HttpMethod
    path: str
    headers: dict[str, str] = field(default_factory=dict)
    query_params: dict[str, str] = field(default_factory=dict)
    body: Any = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "method", HttpMethod(self.method))

    @classmethod
    def get(cls, path: str) -> ApiRequest:
        return cls(HttpMethod.GET, path)

    @classmethod
    def post(cls, path: str) -> ApiRequest:
        return cls(HttpMethod.POST, path)

    @classmethod
    def put(cls, path: str) -> ApiRequest:
        return cls(HttpMethod.PUT, path)

    @classmethod
    def delete(cls, path: str) -> ApiRequest:
        return cls(HttpMethod.DELETE, path)

    @classmethod
    def patch(cls, path: str) -> ApiRequest:
        return cls(HttpMethod.PATCH, path)

    def with_header(self, key: str, value: str) -> ApiRequest:
        return replace(self, headers={**self.headers, key: value})

    def with_json_content_type(self) -> ApiRequest:
        return self.with_header("content-type", "application/json")

    def with_query_param(self, key: str, value: str) -> ApiRequest:
        return replace(self, query_params={**self.query_params, key: value})

    def with_query_params(self, params: Mapping[str, str]) -> ApiRequest:
        return replace(self, query_params={**self.query_params, **params})

    def with_body(self, body: Any) -> ApiRequest:
        return replace(self, body=body)