"""Test the runtime Trace using pytest."""

import operator

from lockstep import Evidence, MapCombinator, Trace, drain


def test_evidence_defaults():
    evidence = Evidence("step")
    assert evidence.action == "step"
    assert evidence.parent_id is None
    assert evidence.info == {}
    assert evidence.timestamp.tzinfo is not None


def test_record_assigns_sequential_ids():
    trace = Trace()
    assert trace.record("a") == 0
    assert trace.record("b") == 1
    assert len(trace) == 2


def test_record_keeps_explicit_parent():
    trace = Trace()
    root = trace.record("root")
    child = trace.record("child", parent_id=root)

    events = trace.get_events()
    assert events[root].parent_id is None
    assert events[child].parent_id == root


def test_find_all_filters_on_info():
    trace = Trace()
    trace.record("step", info={"kind": "produced"})
    trace.record("step", info={"kind": "ended"})
    trace.record("drain_end", info={"kind": "ended"})

    assert len(trace.find_all("step")) == 2
    assert len(trace.find_all(kind="ended")) == 2
    assert len(trace.find_all("step", kind="ended")) == 1


def test_disabled_trace_records_nothing():
    trace = Trace(enabled=False)
    assert trace.record("step") is None
    assert trace.get_events() == []


def test_two_drains_share_one_trace():
    trace = Trace()

    drain(MapCombinator(operator.neg, [1]), trace=trace)
    drain(MapCombinator(operator.neg, []), trace=trace)

    first, second = trace.find_all("drain_begin")
    assert [ev.info["kind"] for ev in trace.find_all("step") if ev.parent_id == first.id] == [
        "produced",
        "ended",
    ]
    assert [ev.info["kind"] for ev in trace.find_all("step") if ev.parent_id == second.id] == [
        "ended"
    ]
