from __future__ import annotations

from s3_context.errors import InvalidPathError


class PathLiteralConvention:
    """Naming convention whose specs are path literals like ``s3://bucket/dir/file.txt``."""

    def __init__(self, bucket: str, scheme: str = "s3") -> None:
        if not bucket:
            raise ValueError("bucket is required")
        self.bucket = bucket
        self.prefix = f"{scheme}://{bucket}/"

    def spec_to_path(self, spec: str) -> list[str]:
        if not isinstance(spec, str) or not spec.startswith(self.prefix):
            raise InvalidPathError(self.prefix, spec)
        return [segment for segment in spec[len(self.prefix) :].split("/") if segment]

    def path_to_spec(self, path: list[str]) -> str:
        return self.prefix + "/".join(path)

    def __repr__(self) -> str:
        return f"PathLiteralConvention(prefix={self.prefix!r})"
