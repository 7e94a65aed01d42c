"""Data types served by the portfolio API, with their JSON shapes."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass, field
from typing import Any


class ServiceNotFoundError(LookupError):
    """Raised when no service item carries the requested id."""

    def __init__(self, message: str = "service not found") -> None:
        super().__init__(message)


def _mapping(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValueError(f"{what} must be a JSON object")
    return data


def _str(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string")
    return value


def _int(data: Mapping[str, Any], key: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"field {key!r} must be an integer")
    return value


def _list(data: Mapping[str, Any], key: str) -> list[Any]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"field {key!r} must be an array")
    return value


def _str_list(data: Mapping[str, Any], key: str) -> list[str]:
    values = _list(data, key)
    if not all(isinstance(value, str) for value in values):
        raise ValueError(f"field {key!r} must be an array of strings")
    return list(values)


@dataclass
class Tool:
    """A tool shown in the about section."""

    id: str = ""
    name: str = ""
    icon: str = ""

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Any) -> Tool:
        data = _mapping(data, "tool")
        return cls(id=_str(data, "id"), name=_str(data, "name"), icon=_str(data, "icon"))


@dataclass
class About:
    """The about section of the portfolio."""

    description: str = ""
    summary: str = ""
    photo: str = ""
    languages: list[str] = field(default_factory=list)
    education: list[str] = field(default_factory=list)
    projects: list[str] = field(default_factory=list)
    tools: list[Tool] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Any) -> About:
        data = _mapping(data, "about")
        return cls(
            description=_str(data, "description"),
            summary=_str(data, "summary"),
            photo=_str(data, "photo"),
            languages=_str_list(data, "languages"),
            education=_str_list(data, "education"),
            projects=_str_list(data, "projects"),
            tools=[Tool.from_dict(item) for item in _list(data, "tools")],
        )


@dataclass
class Hero:
    """The hero banner of the portfolio."""

    name: str = ""
    photo: str = ""
    title: str = ""
    description: str = ""

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class Project:
    """A single project listed in the portfolio."""

    id: str = ""
    name: str = ""
    category: str = ""

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class Portfolio:
    """The portfolio section: a summary and its projects."""

    summary: str = ""
    projects: list[Project] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class ServiceItem:
    """One offered service; ``link_url`` is left out of JSON when empty."""

    id: int = 0
    icon: str = ""
    title: str = ""
    description: str = ""
    link_url: str = ""

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "id": self.id,
            "icon": self.icon,
            "title": self.title,
            "description": self.description,
        }
        if self.link_url:
            result["link_url"] = self.link_url
        return result

    @classmethod
    def from_dict(cls, data: Any) -> ServiceItem:
        data = _mapping(data, "service")
        return cls(
            id=_int(data, "id"),
            icon=_str(data, "icon"),
            title=_str(data, "title"),
            description=_str(data, "description"),
            link_url=_str(data, "link_url"),
        )


@dataclass
class Services:
    """The services section: a summary and its items."""

    summary: str = ""
    items: list[ServiceItem] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"summary": self.summary, "items": [item.to_dict() for item in self.items]}