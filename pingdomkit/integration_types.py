"""Integration definitions and the API responses that describe them."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

_VALID_PROVIDER_IDS = (1, 2)


def _marshal(value: Any) -> str:
    """Encode *value* compactly, escaping HTML-sensitive characters."""
    text = json.dumps(value, ensure_ascii=False, separators=(",", ":"))
    return (
        text.replace("<", "\\u003c")
        .replace(">", "\\u003e")
        .replace("&", "\\u0026")
        .replace("\u2028", "\\u2028")
        .replace("\u2029", "\\u2029")
    )


@dataclass
class IntegrationProvider:
    """A provider an integration can be built on."""

    id: int = 0
    name: str = ""
    description: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> IntegrationProvider:
        return cls(
            id=int(data.get("id") or 0),
            name=data.get("name") or "",
            description=data.get("description") or "",
        )


@dataclass
class WebHookData:
    """The user data of a webhook integration."""

    name: str = ""
    url: str = ""

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "url": self.url}


@dataclass
class WebHookIntegration:
    """A webhook integration to be created or updated."""

    active: bool = False
    provider_id: int = 0
    user_data: WebHookData | None = None

    def post_params(self) -> dict[str, str]:
        """Return the request parameters for this integration."""
        data = None if self.user_data is None else self.user_data.to_dict()
        return {
            "active": "true" if self.active else "false",
            "provider_id": str(self.provider_id),
            "data_json": _marshal(data),
        }

    def valid(self) -> None:
        """Raise ValueError if the integration cannot be sent to the API."""
        if self.provider_id not in _VALID_PROVIDER_IDS:
            raise ValueError("Invalid value for `provider`.  Must contain available provider id")
        if self.user_data is None or not self.user_data.name:
            raise ValueError("Invalid value for `name`.  Must contain non-empty string")
        if not self.user_data.url:
            raise ValueError("Invalid value for `url`.  Must contain non-empty string")


@dataclass
class IntegrationGetResponse:
    """An integration as returned by the API."""

    number_of_connected_checks: int = 0
    id: int = 0
    name: str = ""
    description: str = ""
    provider_id: int = 0
    activated_at: int = 0
    created_at: int = 0
    user_data: dict[str, str] | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> IntegrationGetResponse:
        user_data = data.get("user_data")
        return cls(
            number_of_connected_checks=int(data.get("number_of_connected_checks") or 0),
            id=int(data.get("id") or 0),
            name=data.get("name") or "",
            description=data.get("description") or "",
            provider_id=int(data.get("provider_id") or 0),
            activated_at=int(data.get("activated_at") or 0),
            created_at=int(data.get("created_at") or 0),
            user_data=None if user_data is None else dict(user_data),
        )


@dataclass
class IntegrationStatus:
    """The outcome of an integration create, update or delete call."""

    id: int = 0
    status: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> IntegrationStatus:
        return cls(id=int(data.get("id") or 0), status=bool(data.get("status", False)))