import threading
import time

import pytest

from corekit.waitgroup import WaitGroup


def test_wait_returns_after_all_workers_finish():
    group = WaitGroup()
    group.add(3)
    finished = []
    lock = threading.Lock()

    def worker(worker_id):
        try:
            time.sleep(worker_id * 0.02)
            with lock:
                finished.append(worker_id)
        finally:
            group.done()

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(1, 4)]
    for t in threads:
        t.start()

    assert group.wait(timeout=5) is True
    assert sorted(finished) == [1, 2, 3]
    assert group.count == 0
    for t in threads:
        t.join()


def test_add_and_done_change_counter():
    group = WaitGroup()
    group.add(5)
    assert group.count == 5
    group.done()
    assert group.count == 4


def test_wait_blocks_until_done():
    group = WaitGroup()
    group.add(1)
    returned = threading.Event()
    results = []

    def waiter():
        results.append(group.wait())
        returned.set()

    thread = threading.Thread(target=waiter)
    thread.start()

    assert returned.wait(0.1) is False
    assert results == []
    assert group.count == 1

    group.done()
    assert returned.wait(1.0) is True
    thread.join()
    assert results == [True]
    assert group.count == 0


def test_wait_times_out_when_tasks_remain():
    group = WaitGroup()
    group.add(1)
    assert group.wait(timeout=0.05) is False
    assert group.count == 1


def test_wait_on_zero_counter_returns_immediately():
    group = WaitGroup()
    assert group.wait(timeout=0) is True


def test_negative_counter_raises():
    group = WaitGroup()
    with pytest.raises(ValueError, match="negative"):
        group.add(-1)
    assert group.count == 0


def test_done_without_add_raises():
    group = WaitGroup()
    with pytest.raises(ValueError):
        group.done()