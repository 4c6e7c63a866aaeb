from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Union

# A spec is whatever a naming convention produces: a mapping of named fields,
# or a path literal string for the default convention.
Spec = Union[dict[str, Any], str]


@dataclass(frozen=True)
class ObjectSummary:
    """Raw description of one stored object, as produced by listing."""

    key: str
    size: int
    last_modified: int
    base_name: str

    @classmethod
    def from_listing(cls, entry: dict[str, Any]) -> "ObjectSummary":
        """Build from a ``list_objects_v2`` ``Contents`` entry."""

        key = str(entry["Key"])
        return cls(
            key=key,
            size=int(entry.get("Size") or 0),
            last_modified=to_epoch_ms(entry.get("LastModified")),
            base_name=key.rsplit("/", 1)[-1],
        )


@dataclass(frozen=True)
class ObjectInfo:
    size: int
    last_modified: int

    @property
    def exists(self) -> bool:
        """False for the ``ABSENT`` sentinel (size 0, mtime 0).

        Absence has no separate flag, so a real empty object whose
        last-modified time is the epoch also reads as not existing.
        """
        return self != ABSENT


ABSENT = ObjectInfo(size=0, last_modified=0)


@dataclass(frozen=True)
class Location:
    """Store-native address of a spec."""

    bucket: str
    key: str
    endpoint: str | None = None


@dataclass(frozen=True)
class ContextEntry:
    """A listed spec together with the summary it was read from."""

    spec: Spec
    summary: ObjectSummary

    @property
    def info(self) -> ObjectInfo:
        return ObjectInfo(size=self.summary.size, last_modified=self.summary.last_modified)


def to_epoch_ms(value: datetime | int | float | None) -> int:
    if value is None:
        return 0
    if isinstance(value, datetime):
        return int(value.timestamp() * 1000)
    return int(value)
