from __future__ import annotations

from strata.core.utils.timing import ResolutionTimings, phase, record_phases


def test_phase_without_collector_records_nothing() -> None:
    timings = ResolutionTimings()
    with phase("context.resolve.total"):
        pass
    assert timings.phases == []


def test_nested_phases_record_depth_and_meta() -> None:
    with record_phases() as timings:
        with phase("context.resolve.total"):
            with phase("context.resolve.stage", stage="prd"):
                pass

    assert timings.names() == ["context.resolve.stage", "context.resolve.total"]
    stage = timings.get("context.resolve.stage")
    assert stage.depth == 1 and stage.meta == {"stage": "prd"}
    assert timings.total_ms() == timings.get("context.resolve.total").elapsed_ms
    assert timings.get("context.resolve.extra") is None


def test_collector_is_scoped_to_the_block() -> None:
    outer = ResolutionTimings()
    with record_phases(outer) as timings:
        assert timings is outer
    with phase("after"):
        pass
    assert outer.names() == []
