"""Concurrent workers that each produce a greeting."""

from __future__ import annotations

import argparse
import threading
from collections.abc import Sequence

DEFAULT_WORKER_COUNT = 3


def greeting(worker_id: int) -> str:
    """The greeting a worker with ``worker_id`` produces."""
    return f"Hello, friend! I'm worker {worker_id}."


def gather_greetings(worker_count: int) -> dict[int, str]:
    """Run ``worker_count`` threads and collect their greetings keyed by worker id."""
    if worker_count < 0:
        raise ValueError(f"worker count must not be negative: {worker_count}")
    store: dict[int, str] = {}
    lock = threading.Lock()

    def work(worker_id: int) -> None:
        text = greeting(worker_id)
        with lock:
            store[worker_id] = text

    threads = [threading.Thread(target=work, args=(i,)) for i in range(worker_count)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return dict(sorted(store.items()))


def main(argv: Sequence[str] | None = None) -> int:
    """Print the greetings of all workers, then say goodbye."""
    parser = argparse.ArgumentParser(description="Collect greetings from concurrent workers.")
    parser.add_argument("--workers", type=int, default=DEFAULT_WORKER_COUNT)
    args = parser.parse_args(argv)
    for text in gather_greetings(args.workers).values():
        print(text)
    print("Goodbye, friend!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())