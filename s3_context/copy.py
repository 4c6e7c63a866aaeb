"""Copy a spec between contexts, with a direct-upload fast path for local -> S3."""

from __future__ import annotations

import logging
import shutil
from collections.abc import Callable

from s3_context.context import Context
from s3_context.domain.models import Spec
from s3_context.local import LocalContext
from s3_context.observability import log_event
from s3_context.store.object_context import ObjectContext

logger = logging.getLogger(__name__)

CopyStrategy = Callable[[Spec, Spec, Context, Context], None]


def stream_copy(from_spec: Spec, to_spec: Spec, source: Context, destination: Context) -> None:
    """Generic path: pipe the source input stream into the destination output stream."""

    with source.io(from_spec).input_stream() as reader:
        with destination.io(to_spec).output_stream() as writer:
            shutil.copyfileobj(reader, writer)


def local_to_object_store(
    from_spec: Spec, to_spec: Spec, source: LocalContext, destination: ObjectContext
) -> None:
    """Upload straight from the local file handle with a single PUT."""

    with source.io(from_spec).input_stream() as handle:
        destination.client.put_object(
            Bucket=destination.bucket,
            Key=destination.key_for(to_spec),
            Body=handle,
        )


COPY_STRATEGIES: dict[tuple[type[Context], type[Context]], CopyStrategy] = {
    (LocalContext, ObjectContext): local_to_object_store,
}


def copy_spec(from_spec: Spec, to_spec: Spec, source: Context, destination: Context) -> None:
    """Copy the bytes stored for from_spec in source to to_spec in destination."""

    strategy = COPY_STRATEGIES.get((type(source), type(destination)), stream_copy)
    strategy(from_spec, to_spec, source, destination)
    log_event(
        logger,
        "context.copy",
        source=type(source).__name__,
        destination=type(destination).__name__,
        strategy=strategy.__name__,
    )
