"""Tests for reporting over completed traces."""

from engine import SimulationTrace, simulate
from report import (
    compare_policies,
    event_log,
    fault_curve,
    format_table,
    get_stats,
    trace_rows,
)

BELADY = [1, 2, 3, 4, 1, 2, 5, 1, 2, 3, 4, 5]


class TestStats:
    """Verify hit/fault aggregation."""

    def test_fifo_belady_ratio(self) -> None:
        stats = get_stats(simulate("FIFO", 3, BELADY))
        assert stats == {
            "hits": 3,
            "faults": 9,
            "hit_ratio": 0.25,
            "fault_rate": 0.75,
            "total_refs": 12,
        }

    def test_empty_trace_has_zero_ratio(self) -> None:
        stats = get_stats(SimulationTrace("FIFO", 3, (), ()))
        assert stats["hit_ratio"] == 0.0
        assert stats["fault_rate"] == 0.0
        assert stats["total_refs"] == 0

    def test_ratio_is_rounded(self) -> None:
        stats = get_stats(simulate("FIFO", 1, [1, 1, 2]))
        assert stats["hit_ratio"] == 0.3333


class TestRows:
    """Verify per-step display rows and the text table."""

    def test_rows_use_sentinel_for_missing_victim(self) -> None:
        rows = trace_rows(simulate("FIFO", 2, [1, 1, 2, 3]))
        assert rows[0] == {"step": 0, "page": 1, "result": "Fault", "victim": "-",
                           "frames": "[1 | -]"}
        assert rows[1]["result"] == "Hit"
        assert rows[3]["victim"] == 0
        assert rows[3]["frames"] == "[3 | 2]"

    def test_table_has_header_rows_and_summary(self) -> None:
        text = format_table(simulate("FIFO", 3, BELADY))
        lines = text.splitlines()
        assert lines[0].startswith("Step")
        assert "Frames" in lines[0]
        assert len([ln for ln in lines if ln[:1].isdigit()]) == len(BELADY)
        assert lines[-1] == "Hits: 3, Faults: 9, Hit Ratio: 0.25"


class TestEventLog:
    """Verify the memory event descriptions."""

    def test_opt_replacement_events(self) -> None:
        events = event_log(simulate("OPT", 3, [1, 2, 3, 4, 1, 2]))
        assert events[0] == "Fault: Page 1 not in memory"
        assert events[1] == "Loaded: Page 1 -> Frame 0"
        assert "Evicting: Page 3 from Frame 2" in events
        assert "Loaded: Page 4 -> Frame 2 (replaced)" in events
        assert events[-1] == "Hit: Page 2 in Frame 1"

    def test_one_event_per_hit(self) -> None:
        events = event_log(simulate("LRU", 1, [5, 5, 5]))
        assert events.count("Hit: Page 5 in Frame 0") == 2


class TestComparison:
    """Verify multi-policy summaries."""

    def test_compare_policies_on_belady_string(self) -> None:
        rows = compare_policies(3, BELADY)
        faults = {row["policy"]: row["faults"] for row in rows}
        assert faults == {"FIFO": 9, "OPT": 7, "LRU": 10}
        assert [row["policy"] for row in rows] == ["FIFO", "OPT", "LRU"]

    def test_fault_curve_shows_belady_anomaly(self) -> None:
        curve = fault_curve("FIFO", BELADY, 4)
        assert [c["frames"] for c in curve] == [1, 2, 3, 4]
        assert curve[0]["faults"] == 12
        assert curve[2]["faults"] == 9
        assert curve[3]["faults"] == 10
