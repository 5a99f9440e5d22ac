"""Tests for TraceRecorder and the Step / Trace data types."""

import json

import pytest
from pydantic import ValidationError

from sortviz.recorder import TraceRecorder
from sortviz.run_types import SortStats
from sortviz.trace_types import Highlight, Step, Trace


class TestTraceRecorder:
    def test_record_copies_values(self):
        rec = TraceRecorder("test")
        arr = [3, 1, 2]

        step = rec.record(arr, "start", 1)
        arr[0] = 99

        assert step.values == (3, 1, 2)

    def test_step_indices_are_sequential(self):
        rec = TraceRecorder("test")
        arr = [1, 2]
        for _ in range(3):
            rec.record(arr, "s", 1)
        trace = rec.finish(arr, "done", 2)

        assert [s.step_index for s in trace.steps] == [0, 1, 2, 3]

    def test_swap_exchanges_and_counts(self):
        rec = TraceRecorder("test")
        arr = [1, 2, 3]

        rec.swap(arr, 0, 2)

        assert arr == [3, 2, 1]
        assert rec.swaps == 1

    def test_compare_counts(self):
        rec = TraceRecorder("test")
        rec.compare()
        rec.compare()
        assert rec.comparisons == 2

    def test_mark_sorted_is_cumulative(self):
        rec = TraceRecorder("test")
        rec.mark_sorted([3])
        rec.mark_sorted([1, 2])

        assert rec.sorted_region == frozenset({1, 2, 3})

    def test_sorted_region_is_carried_on_later_steps(self):
        rec = TraceRecorder("test")
        arr = [1, 2, 3]
        first = rec.record(arr, "before", 1)
        rec.mark_sorted([2])
        second = rec.record(arr, "after", 1, comparing=(0, 1))

        assert first.highlight.sorted == frozenset()
        assert second.highlight.sorted == frozenset({2})
        assert second.highlight.comparing == frozenset({0, 1})

    def test_finish_marks_every_index_and_builds_stats(self):
        rec = TraceRecorder("test")
        arr = [2, 1]
        rec.record(arr, "start", 1)
        rec.compare()
        rec.swap(arr, 0, 1)

        trace = rec.finish(arr, "done", 9)

        assert trace.algorithm == "test"
        assert trace.final_step.highlight.sorted == frozenset({0, 1})
        assert trace.final_step.message == "done"
        assert trace.final_step.source_line == 9
        assert trace.stats == SortStats(comparisons=1, swaps=1, steps=2)

    def test_finish_on_empty_values(self):
        rec = TraceRecorder("test")
        rec.record([], "start", 1)
        trace = rec.finish([], "done", 2)

        assert len(trace) == 2
        assert trace.final_step.highlight.sorted == frozenset()


class TestHighlight:
    def test_defaults_are_empty(self):
        hl = Highlight()
        assert hl.comparing == frozenset()
        assert hl.swapping == frozenset()
        assert hl.sorted == frozenset()
        assert hl.pivot is None
        assert hl.current is None
        assert hl.span is None

    def test_comparing_limited_to_two_indices(self):
        with pytest.raises(ValidationError):
            Highlight(comparing=frozenset({0, 1, 2}))

    def test_swapping_limited_to_two_indices(self):
        with pytest.raises(ValidationError):
            Highlight(swapping=frozenset({0, 1, 2}))

    def test_is_frozen(self):
        hl = Highlight(pivot=1)
        with pytest.raises(ValidationError):
            hl.pivot = 2

    def test_to_dict_sorts_index_sets(self):
        hl = Highlight(sorted=frozenset({3, 1, 2}), pivot=0, span=(0, 3))
        d = hl.to_dict()
        assert d["sorted"] == [1, 2, 3]
        assert d["pivot"] == 0
        assert d["span"] == [0, 3]
        assert "current" not in d


class TestStepAndTrace:
    def test_step_is_frozen(self):
        step = Step(step_index=0, values=(1, 2))
        with pytest.raises(AttributeError):
            step.message = "changed"

    def test_trace_sequence_protocol(self):
        steps = (Step(step_index=0, values=(2, 1)), Step(step_index=1, values=(1, 2)))
        trace = Trace(algorithm="test", steps=steps)

        assert len(trace) == 2
        assert trace[1] is steps[1]
        assert list(trace) == list(steps)
        assert trace.final_step is steps[1]

    def test_trace_to_dict_is_json_serializable(self):
        rec = TraceRecorder("test")
        arr = [2, 1]
        rec.record(arr, "start", 1, comparing=(0, 1))
        trace = rec.finish(arr, "done", 2)

        data = json.loads(json.dumps(trace.to_dict()))

        assert data["algorithm"] == "test"
        assert data["stats"] == {"comparisons": 0, "swaps": 0, "steps": 2}
        assert data["steps"][0]["highlight"]["comparing"] == [0, 1]
        assert data["steps"][1]["highlight"]["sorted"] == [0, 1]


class TestSortStats:
    def test_report_lists_counters(self):
        report = SortStats(comparisons=6, swaps=4, steps=19).report("Bubble Sort")
        assert "Bubble Sort" in report
        assert "6" in report
        assert "4" in report
        assert "19" in report
