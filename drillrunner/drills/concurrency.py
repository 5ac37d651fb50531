"""Thread drills: shared data, joined results, a locked counter and a channel."""

from __future__ import annotations

import threading
import time
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from queue import SimpleQueue

_DONE = object()


def offset_sums(numbers: Sequence[int], workers: int = 8) -> list[int]:
    """Sum, on separate threads, the numbers congruent to each offset modulo ``workers``."""
    if workers <= 0:
        raise ValueError("workers must be positive")
    shared = tuple(numbers)

    def sum_offset(offset: int) -> int:
        return sum(n for n in shared if n % workers == offset)

    with ThreadPoolExecutor(max_workers=workers) as pool:
        return list(pool.map(sum_offset, range(workers)))


def timed_workers(count: int = 10, delay: float = 0.25) -> list[float]:
    """Run ``count`` threads that each sleep ``delay`` seconds; return each one's milliseconds."""

    def work() -> float:
        start = time.perf_counter()
        time.sleep(delay)
        return (time.perf_counter() - start) * 1000

    with ThreadPoolExecutor(max_workers=max(count, 1)) as pool:
        futures = [pool.submit(work) for _ in range(count)]
        return [future.result() for future in futures]


@dataclass
class _JobStatus:
    jobs_completed: int = 0
    lock: threading.Lock = field(default_factory=threading.Lock)


def count_jobs(count: int = 10, delay: float = 0.25) -> int:
    """Let ``count`` threads each record one finished job; return the total."""
    status = _JobStatus()

    def work() -> None:
        time.sleep(delay)
        with status.lock:
            status.jobs_completed += 1

    threads = [threading.Thread(target=work) for _ in range(count)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return status.jobs_completed


@dataclass
class Queue:
    """Values to send, split into two halves."""

    length: int = 10
    first_half: list[int] = field(default_factory=lambda: [1, 2, 3, 4, 5])
    second_half: list[int] = field(default_factory=lambda: [6, 7, 8, 9, 10])


def send_all(queue: Queue, delay: float = 1.0) -> list[int]:
    """Send both halves from two threads over one channel; return what arrived."""
    channel: SimpleQueue = SimpleQueue()

    def send(values: list[int]) -> None:
        try:
            for value in values:
                channel.put(value)
                time.sleep(delay)
        finally:
            channel.put(_DONE)

    senders = [
        threading.Thread(target=send, args=(list(half),), daemon=True)
        for half in (queue.first_half, queue.second_half)
    ]
    for sender in senders:
        sender.start()

    received: list[int] = []
    finished = 0
    while finished < len(senders):
        item = channel.get()
        if item is _DONE:
            finished += 1
        else:
            received.append(item)
    return received