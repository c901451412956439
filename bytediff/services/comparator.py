from typing import List, Optional

import numpy as np

from bytediff.models.diff_report import DiffInsight, DiffReport, DiffResult

# bytes compared per numpy pass; bounds the scratch arrays regardless of input size
CHUNK_SIZE = 64 * 1024


class ByteComparator:
    """
    Byte-wise comparison of two buffers of the same length.

    Consecutive differing positions are merged into a single insight, so the
    insights come out ordered by offset, never overlapping and never touching.
    The caller is responsible for checking that both lengths match.
    """

    def __init__(self, chunk_size: int = CHUNK_SIZE):
        if chunk_size < 1:
            raise ValueError("chunk_size must be positive")
        self.chunk_size = chunk_size

    def compare(self, left: bytes, right: bytes) -> DiffReport:
        insights = mismatch_runs(left, right, self.chunk_size)
        if not insights:
            return DiffReport(result=DiffResult.EQUAL)
        return DiffReport(result=DiffResult.NOT_EQUAL, insights=insights)


def mismatch_runs(left: bytes, right: bytes, chunk_size: int = CHUNK_SIZE) -> List[DiffInsight]:
    a = np.frombuffer(left, dtype=np.uint8)
    b = np.frombuffer(right, dtype=np.uint8)
    if a.shape != b.shape:
        raise ValueError(f"buffers differ in length: {a.size} != {b.size}")

    insights: List[DiffInsight] = []
    open_start: Optional[int] = None  # run still running at the end of the previous chunk

    for base in range(0, a.size, chunk_size):
        mask = (a[base:base + chunk_size] != b[base:base + chunk_size]).astype(np.int8)
        # pad with matches on both ends so every run has a rising and a falling edge
        edges = np.diff(np.concatenate(([0], mask, [0])))
        starts = (np.flatnonzero(edges == 1) + base).tolist()
        ends = (np.flatnonzero(edges == -1) + base).tolist()

        if open_start is not None:
            if starts and starts[0] == base:
                starts[0] = open_start
            else:
                insights.append(DiffInsight(offset=open_start, length=base - open_start))
            open_start = None
        if mask[-1]:
            open_start = starts.pop()
            ends.pop()

        insights.extend(DiffInsight(offset=s, length=e - s) for s, e in zip(starts, ends))

    if open_start is not None:
        insights.append(DiffInsight(offset=open_start, length=a.size - open_start))
    return insights
