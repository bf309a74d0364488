# report.py

"""
Reporting over completed simulation traces.

Nothing here runs while a simulation is in progress: every function takes a
finished SimulationTrace (or builds one through ``simulate``) and turns it
into rows, statistics, text or an event log.
"""

from typing import Dict, List, Sequence

from engine import ReplacementPolicy, SimulationTrace, simulate
from utils import EMPTY_SLOT, format_frames


def trace_rows(trace: SimulationTrace) -> List[Dict[str, object]]:
    """
    Build one display row per step.

    Returns:
        List[Dict[str, object]]: Rows with step, page, result, victim and
        frames keys; victim is "-" when nothing was evicted
    """
    rows = []
    for e in trace:
        rows.append({
            "step": e.step,
            "page": e.page_no,
            "result": "Hit" if e.hit else "Fault",
            "victim": EMPTY_SLOT if e.victim is None else e.victim,
            "frames": format_frames(e.frames),
        })
    return rows


def get_stats(trace: SimulationTrace) -> Dict[str, float]:
    """
    Calculate aggregate statistics for a trace.

    Returns:
        Dict[str, float]: Statistics including:
            - hits: Total page hits
            - faults: Total page faults
            - hit_ratio: Hits / Total references (0 for an empty trace)
            - fault_rate: Faults / Total references
            - total_refs: Total references processed
    """
    total_refs = len(trace)
    hits = trace.hits
    faults = total_refs - hits
    hit_ratio = (hits / total_refs) if total_refs > 0 else 0.0
    fault_rate = (faults / total_refs) if total_refs > 0 else 0.0

    return {
        "hits": hits,
        "faults": faults,
        "hit_ratio": round(hit_ratio, 4),
        "fault_rate": round(fault_rate, 4),
        "total_refs": total_refs,
    }


def format_table(trace: SimulationTrace) -> str:
    """Render the trace and its summary as a fixed-width text table."""
    lines = [f"{'Step':<6}{'Page':<8}{'Hit?':<8}{'Victim':<10}Frames", "-" * 60]
    for row in trace_rows(trace):
        hit = "Yes" if row["result"] == "Hit" else "No"
        lines.append(f"{row['step']:<6}{row['page']:<8}{hit:<8}{row['victim']!s:<10}{row['frames']}")

    stats = get_stats(trace)
    lines.append("")
    lines.append(f"Hits: {stats['hits']}, Faults: {stats['faults']}, Hit Ratio: {stats['hit_ratio']}")
    return "\n".join(lines)


def event_log(trace: SimulationTrace) -> List[str]:
    """Describe every step as the memory events it caused, oldest first."""
    events = []
    for e in trace:
        if e.hit:
            events.append(f"Hit: Page {e.page_no} in Frame {e.frame_no}")
            continue
        events.append(f"Fault: Page {e.page_no} not in memory")
        if e.victim is None:
            events.append(f"Loaded: Page {e.page_no} -> Frame {e.frame_no}")
        else:
            events.append(f"Evicting: Page {e.evicted_page} from Frame {e.victim}")
            events.append(f"Loaded: Page {e.page_no} -> Frame {e.frame_no} (replaced)")
    return events


def compare_policies(frame_count: int, references: Sequence[int]) -> List[Dict[str, object]]:
    """Run every policy on the same input and summarise each run."""
    rows = []
    for policy in ReplacementPolicy.ALL:
        stats = get_stats(simulate(policy, frame_count, references))
        rows.append({"policy": policy, **stats})
    return rows


def fault_curve(policy: str, references: Sequence[int], max_frames: int) -> List[Dict[str, int]]:
    """
    Count faults for every frame count from 1 to ``max_frames``.

    Under FIFO the curve is not always non-increasing (Belady's anomaly).
    """
    return [
        {"frames": n, "faults": simulate(policy, n, references).faults}
        for n in range(1, max_frames + 1)
    ]
