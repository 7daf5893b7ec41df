"""CSV performance log of frame rate and per-phase timings."""

from __future__ import annotations

import time
from collections.abc import Callable

from .methods import Method, method_to_string

HEADER = (
    "Timestamp,Boids,Method,AvgFPS,MinFPS,AvgBuildTime(us),"
    "AvgRetrievalTime(us),AvgCheckTime(us)"
)
_INITIAL_MIN_FPS = 1000.0
_FPS_WINDOW = 1.0
_REPORT_INTERVAL = 10.0


def _average(values) -> float:
    return sum(values) / len(values) if values else 0.0


class PerformanceLogger:
    """Collects timings and writes one averaged CSV row every ten seconds.

    The file is overwritten on creation and starts with a header line.
    ``clock`` returns monotonic seconds.
    """

    def __init__(
        self,
        boid_count: int,
        method: Method,
        filename: str = "logs.csv",
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.boid_count = boid_count
        self.method = method
        self.filename = filename
        self._clock = clock
        self._frame_count = 0
        self.min_fps = _INITIAL_MIN_FPS
        self.fps_history: list[int] = []
        self.build_times: list[float] = []
        self.retrieval_times: list[float] = []
        self.check_times: list[float] = []
        self.k_means_times: list[float] = []
        self._last_second = self._last_report = clock()
        self._file = open(filename, "w", encoding="utf-8", newline="")
        self._file.write(HEADER + "\n")

    @property
    def closed(self) -> bool:
        return self._file.closed

    def tick(self) -> None:
        """Count one frame; sample FPS each second and report every ten."""
        self._frame_count += 1
        now = self._clock()
        elapsed = now - self._last_second

        if elapsed >= _FPS_WINDOW:
            fps = self._frame_count / elapsed
            self.min_fps = min(self.min_fps, fps)
            self.fps_history.append(int(fps))
            self._frame_count = 0
            self._last_second = now

        if now - self._last_report >= _REPORT_INTERVAL:
            self.report()
            self._last_report = now
            self.fps_history.clear()
            self.build_times.clear()
            self.retrieval_times.clear()
            self.check_times.clear()
            self.min_fps = _INITIAL_MIN_FPS

    def record_build_time(self, microseconds: float) -> None:
        self.build_times.append(microseconds)

    def record_retrieval_time(self, microseconds: float) -> None:
        self.retrieval_times.append(microseconds)

    def record_check_time(self, microseconds: float) -> None:
        self.check_times.append(microseconds)

    def record_k_means_time(self, microseconds: float) -> None:
        self.k_means_times.append(microseconds)

    def report(self) -> None:
        """Append one row of averages and flush it to disk."""
        timestamp = time.strftime("%Y-%m-%d %H:%M:%S", time.localtime())
        row = (
            f"{timestamp},{self.boid_count},{method_to_string(self.method)},"
            f"{_average(self.fps_history):.2f},{self.min_fps:.2f},"
            f"{_average(self.build_times):.2f},"
            f"{_average(self.retrieval_times):.2f},"
            f"{_average(self.check_times):.2f}\n"
        )
        self._file.write(row)
        self._file.flush()

    def close(self) -> None:
        if not self._file.closed:
            self._file.close()

    def __enter__(self) -> PerformanceLogger:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()