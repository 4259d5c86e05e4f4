"""Doodle shape classification engine."""

from ailab.engine.registry import transform, Layer, get_registry, load_transforms
from ailab.engine.context import ShapeContext
from ailab.engine.results import ClassificationResult, ShapeDescriptor, ShapeName
from ailab.engine.pipeline import Pipeline

__all__ = [
    "transform",
    "Layer",
    "get_registry",
    "load_transforms",
    "ShapeContext",
    "ClassificationResult",
    "ShapeDescriptor",
    "ShapeName",
    "Pipeline",
]
