"""Shared value types: timestamps, enum parsing and pagination."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Generic, Iterator, Mapping, TypeVar

T = TypeVar("T")
E = TypeVar("E", bound=enum.Enum)

_FRACTION = re.compile(r"\.(\d+)")


def parse_timestamp(value: str) -> datetime:
    """Parse an RFC 3339 timestamp such as ``2021-06-25T19:07:33.155Z``."""
    if not isinstance(value, str):
        raise ValueError(f"timestamp must be a string, got {type(value).__name__}")
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"

    def _six_digits(match: re.Match[str]) -> str:
        return "." + match.group(1)[:6].ljust(6, "0")

    text = _FRACTION.sub(_six_digits, text, count=1)
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError as exc:
        raise ValueError(f"invalid timestamp: {value!r}") from exc
    if parsed.tzinfo is None:
        raise ValueError(f"timestamp has no time zone: {value!r}")
    return parsed


def parse_known(enum_type: type[E], value: Any) -> E | Any:
    """Return the member of ``enum_type`` for ``value``, or ``value`` itself if unknown."""
    try:
        return enum_type(value)
    except ValueError:
        return value


@dataclass(frozen=True)
class Timestamps:
    """Creation and last-update times of an API object."""

    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> Timestamps:
        return cls(
            created_at=parse_timestamp(data["created_at"]),
            updated_at=parse_timestamp(data["updated_at"]),
        )


class Order(str, enum.Enum):
    """Sort order of a paginated listing."""

    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class PaginationParams:
    """Parameters controlling one page of a listing."""

    limit: int | None = None
    before: str | None = None
    after: str | None = None
    order: Order = Order.DESC

    def to_query(self) -> dict[str, str]:
        """Return the parameters as query-string pairs, omitting unset ones."""
        query: dict[str, str] = {}
        if self.limit is not None:
            query["limit"] = str(self.limit)
        if self.before is not None:
            query["before"] = self.before
        if self.after is not None:
            query["after"] = self.after
        query["order"] = Order(self.order).value
        return query


@dataclass(frozen=True)
class ListMetadata:
    """Cursors pointing at the neighbouring pages."""

    before: str | None = None
    after: str | None = None


@dataclass(frozen=True)
class PaginatedList(Generic[T]):
    """One page of items with its cursors."""

    data: list[T] = field(default_factory=list)
    metadata: ListMetadata = field(default_factory=ListMetadata)

    @classmethod
    def from_json(
        cls, data: Mapping[str, Any], parse_item: Callable[[Any], T]
    ) -> PaginatedList[T]:
        metadata = data.get("list_metadata") or {}
        return cls(
            data=[parse_item(item) for item in data["data"]],
            metadata=ListMetadata(
                before=metadata.get("before"),
                after=metadata.get("after"),
            ),
        )

    def __iter__(self) -> Iterator[T]:
        return iter(self.data)

    def __len__(self) -> int:
        return len(self.data)