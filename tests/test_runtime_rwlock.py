"""Tests for the RWLock readers-writer lock.

Tests verify:
- Multiple concurrent readers
- Exclusive writer access
- Writer preference (prevents starvation)
- Reentrant read locks
- Upgrade, downgrade and nested write rejection
"""

import threading
import time
from concurrent.futures import ThreadPoolExecutor

import pytest

from flati18n.runtime import RWLock


class TestRWLockBasics:
    """Test basic RWLock functionality."""

    def test_single_reader(self) -> None:
        """Single reader can acquire lock."""
        lock = RWLock()
        acquired = False

        with lock.read():
            acquired = True

        assert acquired

    def test_single_writer(self) -> None:
        """Single writer can acquire and release the lock."""
        lock = RWLock()

        with lock.write():
            assert lock._writer == threading.get_ident()

        assert lock._writer is None
        with lock.read():
            pass

    def test_readers_overlap(self) -> None:
        """Multiple readers hold the lock at the same time."""
        lock = RWLock()
        barrier = threading.Barrier(3, timeout=2)

        def reader() -> None:
            with lock.read():
                # every reader must be inside before any can pass
                barrier.wait()

        with ThreadPoolExecutor(max_workers=3) as executor:
            futures = [executor.submit(reader) for _ in range(3)]
            for future in futures:
                future.result()

    def test_writer_excludes_readers(self) -> None:
        """A reader waits until the writer releases."""
        lock = RWLock()
        writer_in = threading.Event()
        order: list[str] = []

        def writer() -> None:
            with lock.write():
                writer_in.set()
                time.sleep(0.05)
                order.append("writer")

        def reader() -> None:
            writer_in.wait()
            with lock.read():
                order.append("reader")

        threads = [threading.Thread(target=writer), threading.Thread(target=reader)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert order == ["writer", "reader"]

    def test_writer_preference(self) -> None:
        """A waiting writer blocks readers that arrive after it."""
        lock = RWLock()
        reader_in = threading.Event()
        release_reader = threading.Event()
        order: list[str] = []

        def first_reader() -> None:
            with lock.read():
                reader_in.set()
                release_reader.wait()

        def writer() -> None:
            with lock.write():
                order.append("writer")

        def late_reader() -> None:
            with lock.read():
                order.append("late_reader")

        t1 = threading.Thread(target=first_reader)
        t1.start()
        reader_in.wait()
        t2 = threading.Thread(target=writer)
        t2.start()
        while lock._waiting_writers == 0:
            time.sleep(0.001)
        t3 = threading.Thread(target=late_reader)
        t3.start()
        time.sleep(0.02)
        release_reader.set()
        for thread in (t1, t2, t3):
            thread.join()

        assert order == ["writer", "late_reader"]


class TestRWLockReentrancy:
    """Test reentrancy rules."""

    def test_reentrant_read(self) -> None:
        """A thread may nest read locks."""
        lock = RWLock()
        with lock.read(), lock.read():
            pass
        with lock.write():
            pass

    def test_upgrade_rejected(self) -> None:
        """Read -> write upgrade raises instead of deadlocking."""
        lock = RWLock()
        with lock.read(), pytest.raises(RuntimeError, match="upgrade"), lock.write():
            pass  # pragma: no cover

    def test_downgrade_rejected(self) -> None:
        """Acquiring read while holding write raises."""
        lock = RWLock()
        with lock.write(), pytest.raises(RuntimeError, match="holding write lock"), lock.read():
            pass  # pragma: no cover

    def test_nested_write_rejected(self) -> None:
        """Write locks are not reentrant."""
        lock = RWLock()
        with lock.write(), pytest.raises(RuntimeError, match="already holding"), lock.write():
            pass  # pragma: no cover

    def test_lock_usable_after_error(self) -> None:
        """Rejected acquisitions leave the lock consistent."""
        lock = RWLock()
        with lock.read(), pytest.raises(RuntimeError):
            with lock.write():
                pass  # pragma: no cover
        with lock.write():
            assert lock._writer == threading.get_ident()

