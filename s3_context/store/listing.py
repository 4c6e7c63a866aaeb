from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any

from s3_context.domain.models import ObjectSummary

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 1000


def list_objects(
    client: Any,
    bucket: str,
    prefix: str | None = None,
    *,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> Iterator[ObjectSummary]:
    """Lazily yield every object under prefix, following continuation tokens.

    Pages are fetched only as the caller iterates, so stopping early issues no
    further requests. Pagination stops on the service's ``IsTruncated`` flag.
    """

    if page_size <= 0:
        raise ValueError("page_size must be positive")

    request: dict[str, Any] = {"Bucket": bucket, "PaginationConfig": {"PageSize": page_size}}
    if prefix:
        request["Prefix"] = prefix

    paginator = client.get_paginator("list_objects_v2")
    for page_number, page in enumerate(paginator.paginate(**request), start=1):
        contents = page.get("Contents", []) or []
        logger.debug(
            "list_objects page=%s bucket=%s prefix=%s count=%s",
            page_number,
            bucket,
            prefix,
            len(contents),
        )
        for entry in contents:
            yield ObjectSummary.from_listing(entry)
