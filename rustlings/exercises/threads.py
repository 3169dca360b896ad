"""Thread solutions: a shared job counter and two producers feeding one channel."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass, field
from queue import Empty, SimpleQueue

__all__ = ["JobStatus", "run_jobs", "Queue", "send_tx", "receive_all"]

_SEND_DELAY_SECONDS = 1.0
_POLL_SECONDS = 0.01


@dataclass
class JobStatus:
    """A counter of completed jobs, updated under its lock."""

    jobs_completed: int = 0
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)


def run_jobs(count: int, delay: float) -> JobStatus:
    """Run `count` threads that each wait `delay` seconds and then record a job."""
    status = JobStatus()

    def job() -> None:
        time.sleep(delay)
        with status.lock:
            status.jobs_completed += 1

    handles = [threading.Thread(target=job) for _ in range(count)]
    for handle in handles:
        handle.start()
    for handle in handles:
        handle.join()
        with status.lock:
            completed = status.jobs_completed
        print(f"jobs completed {completed}")
    return status


@dataclass(frozen=True)
class Queue:
    """Values to send, split into two halves."""

    length: int = 10
    first_half: tuple[int, ...] = (1, 2, 3, 4, 5)
    second_half: tuple[int, ...] = (6, 7, 8, 9, 10)


def _spawn_senders(
    queue: Queue, channel: SimpleQueue, delay: float
) -> list[threading.Thread]:
    def send(values) -> None:
        for value in values:
            print(f"sending {value}")
            channel.put(value)
            time.sleep(delay)

    senders = [
        threading.Thread(target=send, args=(queue.first_half,)),
        threading.Thread(target=send, args=(queue.second_half,)),
    ]
    for sender in senders:
        sender.start()
    return senders


def send_tx(queue: Queue, channel: SimpleQueue) -> list[threading.Thread]:
    """Start two threads putting each half of the queue on the channel."""
    return _spawn_senders(queue, channel, _SEND_DELAY_SECONDS)


def receive_all(queue: Queue, delay: float) -> list[int]:
    """Send the queue through a channel, collect every value and check the count."""
    channel: SimpleQueue = SimpleQueue()
    senders = _spawn_senders(queue, channel, delay)
    received: list[int] = []
    while True:
        finished = not any(sender.is_alive() for sender in senders)
        try:
            value = channel.get(timeout=_POLL_SECONDS)
        except Empty:
            if finished:
                break
            continue
        print(f"Got: {value}")
        received.append(value)
    print(f"total numbers received: {len(received)}")
    if len(received) != queue.length:
        raise RuntimeError(
            f"received {len(received)} values but the queue length is {queue.length}"
        )
    return received