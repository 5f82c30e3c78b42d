# photo_resizer/workers/variant_worker.py
"""
Variant Worker

Trigger boundary for variant generation. Invoked once per newly stored
original; reads it, runs the pipeline, publishes every variant and logs a
summary. This is the outermost layer: errors are logged here and never
re-raised, and nothing is retried.
"""

import asyncio
import time
from typing import Optional, Sequence

from ..constants import PHOTOS_CONTAINER
from ..enums import LogEmoji, LoggerName, LogSource
from ..models.variant_model import VariantWorkReport
from ..services.logger import get_service_logger
from ..services.storage.base import StorageBackend
from ..services.variant_pipeline import (
    DEFAULT_VARIANT_SIZES,
    VariantPipeline,
    VariantPublisher,
)

logger = get_service_logger(LoggerName.VARIANT_WORKER, LogSource.WORKER)


class VariantWorker:
    """Generates and publishes variants for originals in the photos container."""

    def __init__(
        self,
        storage: StorageBackend,
        pipeline: Optional[VariantPipeline] = None,
        publisher: Optional[VariantPublisher] = None,
        size_names: Sequence[str] = DEFAULT_VARIANT_SIZES,
        source_container: str = PHOTOS_CONTAINER,
    ):
        """
        Initialize VariantWorker.

        Args:
            storage: Backend holding originals (and variants, unless a
                publisher with its own backend is given)
            pipeline: Variant pipeline; its catalog is validated here
            publisher: Variant publisher
            size_names: Sizes generated for every original, in publish order
            source_container: Container the originals are read from
        """
        self.storage = storage
        self.pipeline = pipeline or VariantPipeline()
        self.publisher = publisher or VariantPublisher(storage)
        self.size_names = tuple(size_names)
        self.source_container = source_container

        self.pipeline.catalog.validate()

    def handle_new_photo(self, blob_name: str) -> Optional[VariantWorkReport]:
        """
        Process one original end to end.

        Returns:
            VariantWorkReport, or None if the invocation failed outright
        """
        start_time = time.monotonic()
        try:
            batch = self.pipeline.produce_variants(
                lambda: self.storage.read_all(self.source_container, blob_name),
                blob_name,
                self.size_names,
            )
            outcomes = self.publisher.publish_batch(batch)

            report = VariantWorkReport(
                identifier=blob_name,
                batch=batch,
                outcomes=outcomes,
                processing_time_ms=int((time.monotonic() - start_time) * 1000),
            )
            self._log_report(report)
            return report

        except Exception as e:
            logger.error(
                f"Error running variant worker for {blob_name}",
                exception=e,
                error_context={"blob_name": blob_name},
            )
            return None

    async def ahandle_new_photo(self, blob_name: str) -> Optional[VariantWorkReport]:
        """Run handle_new_photo off the event loop."""
        return await asyncio.to_thread(self.handle_new_photo, blob_name)

    def _log_report(self, report: VariantWorkReport) -> None:
        context = {
            "published": report.published,
            "processing_time_ms": report.processing_time_ms,
        }
        if report.batch.errors:
            context["variant_errors"] = {
                error.size_name: error.error_type for error in report.batch.errors
            }
        if report.publish_failures:
            context["publish_failures"] = [
                outcome.destination for outcome in report.publish_failures
            ]

        if report.batch.errors or report.publish_failures:
            logger.warning(
                f"Variant generation incomplete for {report.identifier}",
                extra_context=context,
            )
        else:
            logger.info(
                f"Resized and published {len(report.published)} variants for {report.identifier}",
                extra_context=context,
                emoji=LogEmoji.SUCCESS,
            )
