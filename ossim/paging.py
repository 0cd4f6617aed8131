"""Page replacement algorithms: FIFO, LRU and optimal.

Each algorithm walks a page reference string with a fixed number of
frames and records, for every reference, whether it caused a page fault.
"""

from __future__ import annotations

from collections import OrderedDict, deque
from dataclasses import dataclass
from typing import Iterable, Sequence

__all__ = [
    "PageAccess",
    "PagingResult",
    "fifo",
    "lru",
    "optimal",
    "format_report",
]


@dataclass(frozen=True)
class PageAccess:
    """One reference to a page and whether it faulted."""

    page: int
    fault: bool


@dataclass(frozen=True)
class PagingResult:
    """The outcome of running a reference string through a replacement policy."""

    frame_count: int
    accesses: tuple[PageAccess, ...]

    @property
    def faults(self) -> int:
        return sum(access.fault for access in self.accesses)

    @property
    def hits(self) -> int:
        return len(self.accesses) - self.faults


def _check_frames(frame_count: int) -> None:
    if frame_count < 1:
        raise ValueError("number of frames must be positive")


def fifo(pages: Iterable[int], frame_count: int) -> PagingResult:
    """First in, first out: evict the page that was loaded earliest."""
    _check_frames(frame_count)
    frames: set[int] = set()
    order: deque[int] = deque()
    accesses = []
    for page in pages:
        if page in frames:
            accesses.append(PageAccess(page, fault=False))
            continue
        if len(frames) == frame_count:
            frames.discard(order.popleft())
        frames.add(page)
        order.append(page)
        accesses.append(PageAccess(page, fault=True))
    return PagingResult(frame_count, tuple(accesses))


def lru(pages: Iterable[int], frame_count: int) -> PagingResult:
    """Least recently used: evict the page unused for the longest time."""
    _check_frames(frame_count)
    frames: OrderedDict[int, None] = OrderedDict()
    accesses = []
    for page in pages:
        if page in frames:
            frames.move_to_end(page)
            accesses.append(PageAccess(page, fault=False))
            continue
        if len(frames) == frame_count:
            frames.popitem(last=False)
        frames[page] = None
        accesses.append(PageAccess(page, fault=True))
    return PagingResult(frame_count, tuple(accesses))


def _predict(pages: Sequence[int], frames: dict[int, None], index: int) -> int:
    """Choose the frame whose next use lies farthest ahead, or never comes."""
    farthest = index
    victim: int | None = None
    for page in frames:
        try:
            next_use = pages.index(page, index)
        except ValueError:
            return page
        if next_use > farthest:
            farthest = next_use
            victim = page
    return next(iter(frames)) if victim is None else victim


def optimal(pages: Iterable[int], frame_count: int) -> PagingResult:
    """Optimal replacement: evict the page needed farthest in the future."""
    _check_frames(frame_count)
    pages = list(pages)
    frames: dict[int, None] = {}
    accesses = []
    for index, page in enumerate(pages):
        if page in frames:
            accesses.append(PageAccess(page, fault=False))
            continue
        if len(frames) >= frame_count:
            del frames[_predict(pages, frames, index + 1)]
        frames[page] = None
        accesses.append(PageAccess(page, fault=True))
    return PagingResult(frame_count, tuple(accesses))


def format_report(result: PagingResult, label: str | None = None) -> str:
    """Describe every reference on its own line, followed by the fault total."""
    lines = [
        f"Page {access.page} caused a page fault."
        if access.fault
        else f"Page {access.page} hit (no fault)."
        for access in result.accesses
    ]
    suffix = f" ({label})" if label else ""
    lines.append("")
    lines.append(f"Total Page Faults{suffix} = {result.faults}")
    return "".join(line + "\n" for line in lines)