"""Composable naming-convention primitives.

A convention is built from parts; each part renders some spec fields into a
piece of text and parses that text back into fields::

    PathConvention(
        Field("type"),
        FileName(SplitBy("_", Field("name"), UtcTimestamp("ts")), "log"),
    )

maps ``{"type": "ticker", "name": "X", "ts": 1555804800000}`` to
``["ticker", "X_2019-04-21.log"]``.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import Any, Protocol

import pytz


class Part(Protocol):
    def format(self, spec: Mapping[str, Any]) -> str: ...

    def parse(self, text: str) -> dict[str, Any]: ...


class Field:
    """A single spec field rendered verbatim."""

    def __init__(self, name: str) -> None:
        self.name = name

    def format(self, spec: Mapping[str, Any]) -> str:
        if self.name not in spec:
            raise KeyError(f"spec is missing field {self.name!r}")
        value = str(spec[self.name])
        if not value:
            raise ValueError(f"empty value for field {self.name!r}")
        if "/" in value:
            raise ValueError(f"field {self.name!r} may not contain '/', got {value!r}")
        return value

    def parse(self, text: str) -> dict[str, Any]:
        if not text:
            raise ValueError(f"empty value for field {self.name!r}")
        return {self.name: text}


class Literal:
    """Fixed text that carries no spec fields."""

    def __init__(self, text: str) -> None:
        self.text = text

    def format(self, spec: Mapping[str, Any]) -> str:
        return self.text

    def parse(self, text: str) -> dict[str, Any]:
        if text != self.text:
            raise ValueError(f"expected literal {self.text!r}, got {text!r}")
        return {}


class UtcTimestamp:
    """An epoch-millisecond field rendered as UTC text with a strftime format."""

    def __init__(self, name: str, fmt: str = "%Y-%m-%d") -> None:
        self.name = name
        self.fmt = fmt

    def format(self, spec: Mapping[str, Any]) -> str:
        if self.name not in spec:
            raise KeyError(f"spec is missing field {self.name!r}")
        moment = datetime.fromtimestamp(int(spec[self.name]) / 1000, tz=pytz.utc)
        return moment.strftime(self.fmt)

    def parse(self, text: str) -> dict[str, Any]:
        moment = pytz.utc.localize(datetime.strptime(text, self.fmt))
        return {self.name: int(round(moment.timestamp() * 1000))}


class SplitBy:
    """Several parts joined by a delimiter within one segment."""

    def __init__(self, delimiter: str, *parts: Part) -> None:
        if not delimiter:
            raise ValueError("delimiter is required")
        if not parts:
            raise ValueError("at least one part is required")
        self.delimiter = delimiter
        self.parts = parts

    def format(self, spec: Mapping[str, Any]) -> str:
        pieces = [part.format(spec) for part in self.parts]
        # parse splits left to right, so only the last piece may hold the delimiter.
        for piece in pieces[:-1]:
            if self.delimiter in piece:
                raise ValueError(
                    f"piece {piece!r} contains the delimiter {self.delimiter!r}"
                )
        return self.delimiter.join(pieces)

    def parse(self, text: str) -> dict[str, Any]:
        pieces = text.split(self.delimiter, len(self.parts) - 1)
        if len(pieces) != len(self.parts):
            raise ValueError(
                f"expected {len(self.parts)} pieces split by {self.delimiter!r}, got {text!r}"
            )
        fields: dict[str, Any] = {}
        for part, piece in zip(self.parts, pieces):
            fields.update(part.parse(piece))
        return fields


class FileName:
    """A part followed by a fixed file extension."""

    def __init__(self, part: Part, extension: str) -> None:
        self.part = part
        self.suffix = "." + extension.lstrip(".")

    def format(self, spec: Mapping[str, Any]) -> str:
        return self.part.format(spec) + self.suffix

    def parse(self, text: str) -> dict[str, Any]:
        if not text.endswith(self.suffix) or len(text) == len(self.suffix):
            raise ValueError(f"expected a file name ending in {self.suffix!r}, got {text!r}")
        return self.part.parse(text[: -len(self.suffix)])


class PathConvention:
    """Naming convention with one part per path segment."""

    def __init__(self, *parts: Part) -> None:
        if not parts:
            raise ValueError("at least one part is required")
        self.parts = parts

    def spec_to_path(self, spec: Mapping[str, Any]) -> list[str]:
        return [part.format(spec) for part in self.parts]

    def path_to_spec(self, path: list[str]) -> dict[str, Any]:
        if len(path) != len(self.parts):
            raise ValueError(f"expected {len(self.parts)} path segments, got {list(path)!r}")
        spec: dict[str, Any] = {}
        for part, segment in zip(self.parts, path):
            spec.update(part.parse(segment))
        return spec
