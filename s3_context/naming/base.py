from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class NamingConvention(Protocol):
    """Bidirectional mapping between a spec and an ordered list of path segments."""

    def spec_to_path(self, spec: Any) -> list[str]:
        """Return the path segments for spec."""

    def path_to_spec(self, path: list[str]) -> Any:
        """Return the spec for the given path segments."""
