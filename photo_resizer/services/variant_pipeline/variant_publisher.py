# photo_resizer/services/variant_pipeline/variant_publisher.py
"""
Variant Publisher

Writes each variant to the destination container for its size, keyed by the
source identifier. Re-publishing the same identifier overwrites.
"""

from typing import List, Set

from ...constants import VARIANT_CONTAINER_PREFIX
from ...enums import LogEmoji, LoggerName, LogSource
from ...exceptions import PublishError, StorageError
from ...models.variant_model import PublishOutcome, VariantBatch, VariantResult
from ..logger import get_service_logger
from ..storage.base import StorageBackend

logger = get_service_logger(LoggerName.VARIANT_PIPELINE, LogSource.PIPELINE)


def destination_for(size_name: str) -> str:
    """Container that holds every variant of one size."""
    return f"{VARIANT_CONTAINER_PREFIX}{size_name}"


class VariantPublisher:
    """Hands encoded variants to the storage backend. No internal retries."""

    def __init__(self, storage: StorageBackend):
        self.storage = storage
        self._ensured: Set[str] = set()

    def _ensure_destination(self, destination: str) -> None:
        # ensure_container is idempotent, so a race here only costs a repeat call
        if destination in self._ensured:
            return
        self.storage.ensure_container(destination)
        self._ensured.add(destination)

    def publish(self, result: VariantResult, identifier: str) -> PublishOutcome:
        """
        Write one variant under ``identifier`` in its size's destination.

        Raises:
            PublishError: carrying destination and identifier, if the storage
                backend fails to create the destination or write the blob
        """
        destination = destination_for(result.size_name)
        try:
            self._ensure_destination(destination)
            self.storage.write(destination, identifier, result.encoded_bytes)
        except StorageError as e:
            raise PublishError(destination, identifier, str(e)) from e

        logger.debug(
            f"Published {destination}/{identifier}",
            extra_context={"bytes": result.size_bytes, "format": result.format.value},
            emoji=LogEmoji.OUTGOING,
        )
        return PublishOutcome(
            size_name=result.size_name,
            destination=destination,
            identifier=identifier,
            success=True,
            bytes_written=result.size_bytes,
        )

    def publish_batch(self, batch: VariantBatch) -> List[PublishOutcome]:
        """Publish every result in the batch; one failed destination does not block the rest."""
        outcomes = []
        for result in batch.results:
            try:
                outcomes.append(self.publish(result, batch.identifier))
            except PublishError as e:
                logger.error(
                    f"Failed to publish variant '{result.size_name}' for {batch.identifier}",
                    exception=e,
                    error_context={"destination": e.destination},
                )
                outcomes.append(
                    PublishOutcome(
                        size_name=result.size_name,
                        destination=e.destination,
                        identifier=batch.identifier,
                        success=False,
                        error=e,
                    )
                )
        return outcomes
