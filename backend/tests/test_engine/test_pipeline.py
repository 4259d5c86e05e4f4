"""Tests for the pipeline orchestrator."""

from ailab.engine.context import ShapeContext
from ailab.engine.pipeline import Pipeline, create_pipeline
from ailab.engine.registry import Layer, TransformRegistry, TransformSpec


def test_pipeline_runs_transforms():
    reg = TransformRegistry()
    results = []

    def t1(ctx: ShapeContext) -> None:
        results.append("t1")

    def t2(ctx: ShapeContext) -> None:
        results.append("t2")

    reg.register(TransformSpec(id="T0.01", layer=Layer.SAMPLING, fn=t1))
    reg.register(TransformSpec(id="T0.02", layer=Layer.SAMPLING, fn=t2, dependencies=["T0.01"]))

    pipeline = Pipeline(registry=reg)
    ctx = ShapeContext()
    pipeline.run(ctx)

    assert results == ["t1", "t2"]
    assert "T0.01" in ctx.completed_transforms
    assert "T0.02" in ctx.completed_transforms


def test_pipeline_handles_errors():
    reg = TransformRegistry()

    def fail(ctx: ShapeContext) -> None:
        raise ValueError("test error")

    reg.register(TransformSpec(id="T0.01", layer=Layer.SAMPLING, fn=fail))

    pipeline = Pipeline(registry=reg)
    ctx = ShapeContext()
    pipeline.run(ctx)

    assert "T0.01" in ctx.errors
    assert "test error" in ctx.errors["T0.01"]


def test_run_layer_only_touches_that_layer():
    reg = TransformRegistry()
    seen = []
    reg.register(TransformSpec(id="T0.01", layer=Layer.SAMPLING, fn=lambda ctx: seen.append("s")))
    reg.register(TransformSpec(id="T1.01", layer=Layer.DESCRIPTORS, fn=lambda ctx: seen.append("d")))

    Pipeline(registry=reg).run_layer(ShapeContext(), Layer.DESCRIPTORS)
    assert seen == ["d"]


def test_full_pipeline_fills_context(circle_bitmap):
    ctx = create_pipeline().run(ShapeContext(bitmap=circle_bitmap))

    assert not ctx.errors
    assert len(ctx.completed_transforms) == 7
    assert ctx.grid.shape == (60, 80)
    assert len(ctx.outline) > 0
    assert set(ctx.features) == {"roundness", "symmetry", "corners", "closed"}
    assert ctx.result is not None


def test_pipeline_without_bitmap_is_unknown():
    ctx = create_pipeline().run(ShapeContext())
    assert not ctx.errors
    assert ctx.result.shape_name == "Unknown Shape"
