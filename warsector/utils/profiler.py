"""
Frame profiler for the render loop.

Lightweight per-section timing for diagnosing slow frames.

Usage:
    profiler = FrameProfiler(interval=5.0)

    # In render loop:
    profiler.begin_frame()
    do_clear()
    profiler.mark("clear")
    draw_shapes()
    profiler.mark("shapes")
    profiler.end_frame()
"""

import time
import collections
from typing import Callable, Dict, List, Optional

import numpy as np

from warsector.utils.logging import get_logger

logger = get_logger(__name__)


class _Stats:
    """Rolling window of timing samples (seconds)."""

    __slots__ = ("_values",)

    def __init__(self, window: int = 300):
        self._values = collections.deque(maxlen=window)

    def add(self, value: float):
        self._values.append(value)

    @property
    def count(self) -> int:
        return len(self._values)

    def summary(self) -> Dict[str, float]:
        """avg / p95 / max of the window, all zero when empty."""
        if not self._values:
            return {"avg": 0.0, "p95": 0.0, "max": 0.0}
        arr = np.fromiter(self._values, dtype=float)
        return {
            "avg": float(arr.mean()),
            "p95": float(np.percentile(arr, 95)),
            "max": float(arr.max()),
        }


def _fmt_ms(seconds: float) -> str:
    return f"{seconds * 1000:.2f}ms"


class FrameProfiler:
    """Collects per-frame section timings and logs periodic summaries.

    Sections are defined dynamically by calls to mark(name) between
    begin_frame() and end_frame().

    Args:
        interval: Seconds between summary log outputs.
        window: Number of recent samples to keep per section.
        clock: Monotonic time source in seconds.
    """

    def __init__(self, interval: float = 5.0, window: int = 300,
                 clock: Callable[[], float] = time.perf_counter):
        self._interval = interval
        self._window = window
        self._clock = clock

        self._sections: Dict[str, _Stats] = {}
        self._section_order: List[str] = []
        self._frame_stats = _Stats(window)

        self._frame_start: float = 0.0
        self._last_mark: float = 0.0

        self._last_report: Optional[float] = None
        self._frame_count: int = 0

    @property
    def frame_count(self) -> int:
        """Frames completed since the last report."""
        return self._frame_count

    def begin_frame(self):
        """Call at the start of each render frame."""
        now = self._clock()
        self._frame_start = now
        self._last_mark = now
        if self._last_report is None:
            self._last_report = now

    def mark(self, section: str):
        """Record time elapsed since last mark (or begin_frame) as a named section."""
        now = self._clock()
        elapsed = now - self._last_mark
        self._last_mark = now

        if section not in self._sections:
            self._sections[section] = _Stats(self._window)
            self._section_order.append(section)
        self._sections[section].add(elapsed)

    def end_frame(self):
        """Call at the end of each render frame. Triggers periodic reporting."""
        now = self._clock()
        self._frame_stats.add(now - self._frame_start)
        self._frame_count += 1

        if now - self._last_report >= self._interval:
            self.report(now - self._last_report)
            self._last_report = now

    def report(self, period: float) -> str:
        """Log and return a summary of the current window."""
        fps = self._frame_count / period if period > 0 else 0.0
        lines = [
            f"=== PROFILE ({self._frame_stats.count} frames, {fps:.1f} FPS) ===",
            f"  {'Section':<12s} {'avg':>8s} {'p95':>8s} {'max':>8s}",
        ]
        rows = [(name, self._sections[name]) for name in self._section_order]
        rows.append(("TOTAL", self._frame_stats))
        for name, stats in rows:
            s = stats.summary()
            lines.append(
                f"  {name:<12s} {_fmt_ms(s['avg']):>8s} "
                f"{_fmt_ms(s['p95']):>8s} {_fmt_ms(s['max']):>8s}"
            )

        text = "\n".join(lines)
        logger.info(text)
        self._frame_count = 0
        return text
