"""Transaction (TMS) check definitions and their validation rules."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from typing import Any

_VALID_INTERVALS = (0, 5, 10, 20, 60, 720, 1440)
_TAG_PATTERN = re.compile(r"[0-9A-Za-z_-]+")
_HTML_ESCAPES = {"<": "\\u003c", ">": "\\u003e", "&": "\\u0026",
                 "\u2028": "\\u2028", "\u2029": "\\u2029"}


def _sort_maps(value: Any) -> Any:
    """Return *value* with the keys of every nested mapping in sorted order."""
    if isinstance(value, dict):
        return {key: _sort_maps(value[key]) for key in sorted(value)}
    if isinstance(value, (list, tuple)):
        return [_sort_maps(item) for item in value]
    return value


def _int_list(values: Any) -> list[int] | None:
    return None if values is None else [int(item) for item in values]


@dataclass
class TMSCheckStep:
    """One step of a transaction check: a function name and its arguments."""

    args: dict[str, str] | None = None
    fn: str = ""

    def to_dict(self) -> dict[str, Any]:
        result = {"args": _sort_maps(self.args or {}), "fn": self.fn}
        return {key: value for key, value in result.items() if value}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TMSCheckStep:
        args = data.get("args")
        return cls(args=None if args is None else dict(args), fn=data.get("fn") or "")


@dataclass
class TMSCheckMetaData:
    """Browser settings attached to a transaction check."""

    authentications: Any = None
    disable_web_security: bool = False
    height: int = 0
    width: int = 0

    def to_dict(self) -> dict[str, Any]:
        result = {
            "authentications": _sort_maps(self.authentications),
            "disableWebSecurity": self.disable_web_security,
            "height": self.height,
            "width": self.width,
        }
        return {key: value for key, value in result.items()
                if value or (key == "authentications" and value is not None)}


def _metadata_from_dict(data: dict[str, Any] | None) -> TMSCheckMetaData | None:
    if data is None:
        return None
    return TMSCheckMetaData(
        authentications=data.get("authentications"),
        disable_web_security=bool(data.get("disableWebSecurity", False)),
        height=int(data.get("height") or 0),
        width=int(data.get("width") or 0),
    )


@dataclass
class TMSCheck:
    """A transaction check as submitted to the API."""

    name: str = ""
    steps: list[TMSCheckStep] | None = None
    active: bool = False
    contact_ids: list[int] | None = None
    custom_message: str = ""
    integration_ids: list[int] | None = None
    interval: int = 0
    metadata: TMSCheckMetaData | None = None
    region: str = ""
    send_notification_when_down: int = 0
    severity_level: str = ""
    tags: list[str] | None = None
    team_ids: list[int] | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return the API representation, leaving out empty optional fields."""
        result = {
            "name": self.name,
            "steps": [step.to_dict() for step in self.steps or ()],
            "active": self.active,
            "contact_ids": list(self.contact_ids or ()),
            "custom_message": self.custom_message,
            "integration_ids": list(self.integration_ids or ()),
            "interval": self.interval,
            "metadata": None if self.metadata is None else self.metadata.to_dict(),
            "region": self.region,
            "send_notification_when_down": self.send_notification_when_down,
            "severity_level": self.severity_level,
            "tags": list(self.tags or ()),
            "team_ids": list(self.team_ids or ()),
        }
        return {key: value for key, value in result.items()
                if value or key == "active" or (key == "metadata" and value is not None)}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TMSCheck:
        """Build a check from its API representation, ignoring unknown keys."""
        steps = data.get("steps")
        tags = data.get("tags")
        return cls(
            name=data.get("name") or "",
            steps=None if steps is None else [TMSCheckStep.from_dict(s) for s in steps],
            active=bool(data.get("active", False)),
            contact_ids=_int_list(data.get("contact_ids")),
            custom_message=data.get("custom_message") or "",
            integration_ids=_int_list(data.get("integration_ids")),
            interval=int(data.get("interval") or 0),
            metadata=_metadata_from_dict(data.get("metadata")),
            region=data.get("region") or "",
            send_notification_when_down=int(data.get("send_notification_when_down") or 0),
            severity_level=data.get("severity_level") or "",
            tags=None if tags is None else [str(tag) for tag in tags],
            team_ids=_int_list(data.get("team_ids")),
        )

    def render_for_json_api(self) -> str:
        """Return the JSON document that is sent to the API."""
        text = json.dumps(self.to_dict(), ensure_ascii=False, separators=(",", ":"))
        return "".join(_HTML_ESCAPES.get(char, char) for char in text)

    def valid(self) -> None:
        """Raise ValueError if any field holds a value the API would reject."""
        if not self.name:
            raise ValueError("Invalid value for `Name`. Must contain non-empty string.")
        if not self.steps:
            raise ValueError("Invalid value for `Steps`. Must contain non-empty value.")
        if self.interval not in _VALID_INTERVALS:
            raise ValueError(
                "Invalid value for `Interval`. Please provide one of the following "
                "valid values instead: [5 10 20 60 720 1440]."
            )
        if self.severity_level not in ("", "high", "low"):
            raise ValueError(
                "Invalid value for `SeverityLevel`. Please provide one of the following "
                "valid values instead: [high,low]."
            )
        for tag in self.tags or ():
            found = _TAG_PATTERN.search(tag)
            if (found.group(0) if found else "") != tag:
                raise ValueError(
                    "Invalid value for `Tags`. The tag name may contain the characters "
                    "'A-Z', 'a-z', '0-9', '_' and '-'."
                )