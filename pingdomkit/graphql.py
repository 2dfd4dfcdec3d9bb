"""GraphQL request and response handling."""

from __future__ import annotations

import json
import logging
import urllib.error
import urllib.request
from dataclasses import dataclass
from typing import Any, Mapping

from .utils import to_json_no_escape

logger = logging.getLogger(__name__)


class GraphQLRequestError(Exception):
    """Raised when a GraphQL request fails or reports no success."""


@dataclass
class GraphQLRequest:
    """A named GraphQL operation with its variables."""

    operation_name: str
    query: str
    variables: Any = None
    response_type: str = ""

    def to_payload(self) -> dict[str, Any]:
        """Return the request body; the response type is not part of it."""
        return {"operationName": self.operation_name, "variables": self.variables,
                "query": self.query}


class GraphQLResponse(dict):
    """The object found under the requested key of a response's data."""

    def is_success(self) -> bool:
        return bool(self.get("success", True))

    def message(self) -> str:
        return str(self.get("message", ""))


def parse_graphql_response(body: Any, key: str) -> GraphQLResponse:
    """Parse a response body and return the object stored under data[key]."""
    if hasattr(body, "read"):
        body = body.read()
    if isinstance(body, (bytes, bytearray)):
        body = body.decode("utf-8")
    logger.debug("The response body is: %s", body)
    root = json.loads(body)
    data = root.get("data") if isinstance(root, dict) else None
    if not isinstance(data, dict):
        dumped = json.dumps(root, sort_keys=True, separators=(",", ":"))
        raise GraphQLRequestError(f"request failed with response: {dumped}")
    entry = data.get(key)
    if not isinstance(entry, dict):
        raise GraphQLRequestError(f"response has no object under {key!r}")
    return GraphQLResponse(entry)


class GraphQLClient:
    """Posts GraphQL requests to one endpoint."""

    def __init__(self, endpoint: str, headers: Mapping[str, str] | None = None,
                 timeout: float = 30.0) -> None:
        self.endpoint = endpoint
        self.headers = dict(headers or {})
        self.timeout = timeout

    def make_graphql_request(self, request: GraphQLRequest) -> GraphQLResponse:
        """Send *request* and return its response, raising if it did not succeed."""
        http_request = urllib.request.Request(
            self.endpoint,
            data=to_json_no_escape(request.to_payload()).encode("utf-8"),
            method="POST",
            headers={"Content-Type": "application/json", **self.headers},
        )
        try:
            with urllib.request.urlopen(http_request, timeout=self.timeout) as reply:
                raw = reply.read()
        except urllib.error.URLError as exc:
            raise GraphQLRequestError(f"request to {self.endpoint} failed: {exc}") from exc
        response = parse_graphql_response(raw, request.response_type)
        if not response.is_success():
            raise GraphQLRequestError(response.message())
        return response