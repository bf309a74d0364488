# engine.py

"""
Page replacement engine.

Holds the frame table, the three replacement policies (FIFO, OPT, LRU) and
the simulation driver that replays a reference string through one of them.
Everything here is plain Python; the Streamlit app and the console runner
only consume the trace produced by ``simulate``.
"""

from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Tuple


class InvalidConfiguration(ValueError):
    """Raised when a simulation is requested with unusable settings."""


class ReplacementPolicy:
    """
    Enumeration of available page replacement algorithms.

    FIFO: First-In-First-Out - replaces the oldest page in memory
    OPT:  Optimal - replaces the page whose next use is farthest away
    LRU:  Least Recently Used - replaces the page not used for longest time
    """
    FIFO = "FIFO"
    OPT = "OPT"
    LRU = "LRU"

    ALL = (FIFO, OPT, LRU)


# =============================================================================
# FRAME TABLE
# =============================================================================

@dataclass
class Frame:
    """
    A physical memory frame.

    Attributes:
        frame_no (int): The frame's index in the table
        occupied (bool): True if a page is currently loaded here
        page_no (Optional[int]): The resident page, None while free
    """
    frame_no: int
    occupied: bool = False
    page_no: Optional[int] = None

    def __repr__(self):
        state = self.page_no if self.occupied else "-"
        return f"[F{self.frame_no}|{state}]"


class FrameTable:
    """
    Fixed-size table of frames, all free at creation.

    This is a passive store: lookups and a single ``load`` mutation. Which
    frame to overwrite is decided by the policies.
    """

    def __init__(self, frame_count: int):
        self.frames: List[Frame] = [Frame(i) for i in range(frame_count)]

    def __len__(self) -> int:
        return len(self.frames)

    def __iter__(self) -> Iterator[Frame]:
        return iter(self.frames)

    def __getitem__(self, frame_no: int) -> Frame:
        return self.frames[frame_no]

    def find_page(self, page_no: int) -> Optional[int]:
        """Return the frame holding ``page_no``, or None if it is not resident."""
        for f in self.frames:
            if f.occupied and f.page_no == page_no:
                return f.frame_no
        return None

    def first_empty(self) -> Optional[int]:
        """Return the lowest unoccupied frame number, or None if the table is full."""
        for f in self.frames:
            if not f.occupied:
                return f.frame_no
        return None

    def load(self, frame_no: int, page_no: int) -> Optional[int]:
        """
        Place a page into a frame.

        Returns:
            Optional[int]: The page that was resident before, None if the
            frame was free
        """
        frame = self.frames[frame_no]
        previous = frame.page_no if frame.occupied else None
        frame.occupied = True
        frame.page_no = page_no
        return previous

    def occupied_count(self) -> int:
        return sum(1 for f in self.frames if f.occupied)

    def resident_pages(self) -> List[int]:
        return [f.page_no for f in self.frames if f.occupied]

    def snapshot(self) -> Tuple[Optional[int], ...]:
        """Resident page per frame, None for free frames."""
        return tuple(f.page_no if f.occupied else None for f in self.frames)


# =============================================================================
# POLICIES
# =============================================================================

@dataclass(frozen=True)
class Decision:
    """
    Outcome of one reference.

    Attributes:
        hit (bool): True if the page was already resident
        frame_no (int): Frame holding the page after the step
        evicted_page (Optional[int]): Page overwritten on a replacement,
            None on hits and on fills of free frames
    """
    hit: bool
    frame_no: int
    evicted_page: Optional[int] = None

    @property
    def evicted(self) -> bool:
        return self.evicted_page is not None


class PagePolicy:
    """
    All page replacement algorithms implement decide().

    A policy instance carries the bookkeeping for exactly one run.
    """

    name: str = "BASE"

    def __init__(self, frame_count: int):
        self.frame_count = frame_count

    def decide(self, step: int, page_no: int, frames: FrameTable,
               references: Sequence[int]) -> Decision:
        raise NotImplementedError

    # -----------------------------
    # Shared hit / free frame path
    # -----------------------------
    def _hit_or_fill(self, step: int, page_no: int, frames: FrameTable) -> Optional[Decision]:
        frame_no = frames.find_page(page_no)
        if frame_no is not None:
            self.on_hit(step, frame_no)
            return Decision(True, frame_no)

        frame_no = frames.first_empty()
        if frame_no is not None:
            frames.load(frame_no, page_no)
            self.on_load(step, frame_no)
            return Decision(False, frame_no)

        return None

    def _replace(self, step: int, victim_frame_no: int, page_no: int,
                 frames: FrameTable) -> Decision:
        evicted_page = frames.load(victim_frame_no, page_no)
        self.on_load(step, victim_frame_no)
        return Decision(False, victim_frame_no, evicted_page)

    def on_hit(self, step: int, frame_no: int) -> None:
        return

    def on_load(self, step: int, frame_no: int) -> None:
        return


class FifoPolicy(PagePolicy):
    """
    FIFO: replace the page that has been in memory the longest.

    Frames fill in index order, so a rotating cursor over the frame numbers
    always points at the oldest page once the table is full.
    """

    name = ReplacementPolicy.FIFO

    def __init__(self, frame_count: int):
        super().__init__(frame_count)
        self.next_index = 0

    def decide(self, step, page_no, frames, references):
        decision = self._hit_or_fill(step, page_no, frames)
        if decision is not None:
            return decision

        victim_frame_no = self.next_index
        self.next_index = (self.next_index + 1) % len(frames)
        return self._replace(step, victim_frame_no, page_no, frames)


class LruPolicy(PagePolicy):
    """
    LRU: replace the least recently used page.

    ``last_used`` holds the step of the latest access per frame, -1 for a
    frame that was never used. Ties go to the lowest frame number.
    """

    name = ReplacementPolicy.LRU

    def __init__(self, frame_count: int):
        super().__init__(frame_count)
        self.last_used: List[int] = [-1] * frame_count

    def on_hit(self, step, frame_no):
        self.last_used[frame_no] = step

    def on_load(self, step, frame_no):
        self.last_used[frame_no] = step

    def decide(self, step, page_no, frames, references):
        decision = self._hit_or_fill(step, page_no, frames)
        if decision is not None:
            return decision

        victim_frame_no = 0
        oldest = self.last_used[0]
        for i in range(1, len(frames)):
            if self.last_used[i] < oldest:
                oldest = self.last_used[i]
                victim_frame_no = i

        return self._replace(step, victim_frame_no, page_no, frames)


class OptPolicy(PagePolicy):
    """
    OPT: replace the page whose next use lies farthest in the future.

    Keeps no state of its own; the distance to the next use is recomputed
    from the reference string on every replacement. A page that is never
    referenced again has an infinite distance. Frames are scanned in index
    order with a strict comparison, so the first frame to reach the maximum
    is the victim.
    """

    name = ReplacementPolicy.OPT

    @staticmethod
    def next_use_distance(references: Sequence[int], step: int, page_no: int) -> float:
        for j in range(step + 1, len(references)):
            if references[j] == page_no:
                return j - step
        return float('inf')

    def decide(self, step, page_no, frames, references):
        decision = self._hit_or_fill(step, page_no, frames)
        if decision is not None:
            return decision

        victim_frame_no = None
        farthest = -1
        for f in frames:
            distance = self.next_use_distance(references, step, f.page_no)
            if distance > farthest:
                farthest = distance
                victim_frame_no = f.frame_no

        return self._replace(step, victim_frame_no, page_no, frames)


_POLICIES = {
    ReplacementPolicy.FIFO: FifoPolicy,
    ReplacementPolicy.OPT: OptPolicy,
    ReplacementPolicy.LRU: LruPolicy,
}


def normalize_policy(policy: str) -> str:
    """Map a policy name (any case) onto one of ReplacementPolicy.ALL."""
    name = str(policy).strip().upper()
    if name not in _POLICIES:
        raise InvalidConfiguration(
            f"Unknown replacement policy {policy!r} (choose from {', '.join(ReplacementPolicy.ALL)})"
        )
    return name


def make_policy(policy: str, frame_count: int) -> PagePolicy:
    return _POLICIES[normalize_policy(policy)](frame_count)


# =============================================================================
# SIMULATION DRIVER
# =============================================================================

@dataclass(frozen=True)
class TraceEntry:
    """
    One processed reference.

    Attributes:
        step (int): Zero-based index into the reference string
        page_no (int): Page requested at this step
        hit (bool): True if the page was already resident
        frame_no (int): Frame holding the page after the step
        victim (Optional[int]): Frame whose page was evicted, None when a
            free frame was filled or on a hit
        evicted_page (Optional[int]): The page that was evicted, if any
        frames (Tuple[Optional[int], ...]): Frame table after the step
    """
    step: int
    page_no: int
    hit: bool
    frame_no: int
    victim: Optional[int]
    evicted_page: Optional[int]
    frames: Tuple[Optional[int], ...]


@dataclass(frozen=True)
class SimulationTrace:
    """Completed run: the settings it was made with and one entry per reference."""
    policy: str
    frame_count: int
    references: Tuple[int, ...]
    entries: Tuple[TraceEntry, ...]

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[TraceEntry]:
        return iter(self.entries)

    def __getitem__(self, step: int) -> TraceEntry:
        return self.entries[step]

    @property
    def hits(self) -> int:
        return sum(1 for e in self.entries if e.hit)

    @property
    def faults(self) -> int:
        return len(self.entries) - self.hits


def _validate(frame_count, references) -> Tuple[int, ...]:
    if isinstance(frame_count, bool) or not isinstance(frame_count, int):
        raise InvalidConfiguration(f"Frame count must be an integer, got {frame_count!r}")
    if frame_count <= 0:
        raise InvalidConfiguration(f"Frame count must be positive, got {frame_count}")

    refs = tuple(references)
    if len(refs) == 0:
        raise InvalidConfiguration("Reference string cannot be empty")
    for r in refs:
        if isinstance(r, bool) or not isinstance(r, int):
            raise InvalidConfiguration(f"Page numbers must be integers, got {r!r}")
    return refs


def simulate(policy: str, frame_count: int, references: Sequence[int]) -> SimulationTrace:
    """
    Replay a reference string through one replacement policy.

    A fresh frame table and a fresh policy are built for every call, so
    repeated runs with the same arguments give identical traces.

    Args:
        policy (str): One of ReplacementPolicy.ALL (case-insensitive)
        frame_count (int): Number of frames, at least 1
        references (Sequence[int]): Page numbers in access order, non-empty

    Returns:
        SimulationTrace: One TraceEntry per reference, in order

    Raises:
        InvalidConfiguration: If the settings are unusable; nothing is run
    """
    name = normalize_policy(policy)
    refs = _validate(frame_count, references)

    frames = FrameTable(frame_count)
    engine = make_policy(name, frame_count)
    entries: List[TraceEntry] = []

    for step, page_no in enumerate(refs):
        decision = engine.decide(step, page_no, frames, refs)
        entries.append(TraceEntry(
            step=step,
            page_no=page_no,
            hit=decision.hit,
            frame_no=decision.frame_no,
            victim=decision.frame_no if decision.evicted else None,
            evicted_page=decision.evicted_page,
            frames=frames.snapshot(),
        ))

    return SimulationTrace(name, frame_count, refs, tuple(entries))
