"""Pipeline orchestrator — runs transforms in dependency order."""

from __future__ import annotations

import logging
import time

from ailab.engine.context import ShapeContext
from ailab.engine.registry import Layer, TransformRegistry, get_registry, load_transforms

logger = logging.getLogger(__name__)


class Pipeline:
    """Orchestrates the transform pipeline."""

    def __init__(self, registry: TransformRegistry | None = None) -> None:
        self.registry = registry or get_registry()

    def run(self, ctx: ShapeContext) -> ShapeContext:
        """Run every registered transform on the given context."""
        start = time.perf_counter()
        ordered = self.registry.resolve_order()

        logger.debug("Pipeline: %d transforms queued", len(ordered))

        for spec in ordered:
            t0 = time.perf_counter()
            try:
                spec.fn(ctx)
                ctx.completed_transforms.add(spec.id)
                elapsed = (time.perf_counter() - t0) * 1000
                logger.debug("  %s completed in %.1fms", spec.id, elapsed)
            except Exception as e:
                ctx.errors[spec.id] = str(e)
                logger.warning("  %s FAILED: %s", spec.id, e)

        total = (time.perf_counter() - start) * 1000
        logger.info(
            "Pipeline complete: %d/%d transforms in %.1fms",
            len(ctx.completed_transforms),
            len(ordered),
            total,
        )
        return ctx

    def run_layer(self, ctx: ShapeContext, layer: Layer) -> ShapeContext:
        """Run only transforms in a specific layer."""
        for spec in self.registry.get_layer(layer):
            try:
                spec.fn(ctx)
                ctx.completed_transforms.add(spec.id)
            except Exception as e:
                ctx.errors[spec.id] = str(e)
                logger.warning("  %s FAILED: %s", spec.id, e)
        return ctx


def create_pipeline() -> Pipeline:
    """Factory function for a pipeline over the fully loaded global registry."""
    return Pipeline(registry=load_transforms())
