"""Object key helpers."""

from s3_context.io.uri import join_key, key_prefix, normalize_root, split_key

__all__ = [
    "join_key",
    "key_prefix",
    "normalize_root",
    "split_key",
]
