"""Tests for the readers-writer lock."""

import threading

from property_registry.locking import ReadWriteLock


class TestReadWriteLock:
    def test_readers_share(self) -> None:
        lock = ReadWriteLock()
        entered = threading.Event()

        def reader() -> None:
            with lock.read():
                entered.set()

        with lock.read():
            t = threading.Thread(target=reader)
            t.start()
            assert entered.wait(timeout=2)
        t.join()

    def test_writer_waits_for_reader(self) -> None:
        lock = ReadWriteLock()
        entered = threading.Event()

        def writer() -> None:
            with lock.write():
                entered.set()

        with lock.read():
            t = threading.Thread(target=writer)
            t.start()
            assert not entered.wait(timeout=0.1)
        assert entered.wait(timeout=2)
        t.join()

    def test_reader_waits_for_writer(self) -> None:
        lock = ReadWriteLock()
        entered = threading.Event()

        def reader() -> None:
            with lock.read():
                entered.set()

        with lock.write():
            t = threading.Thread(target=reader)
            t.start()
            assert not entered.wait(timeout=0.1)
        assert entered.wait(timeout=2)
        t.join()

    def test_released_after_exception(self) -> None:
        lock = ReadWriteLock()

        try:
            with lock.write():
                raise RuntimeError("boom")
        except RuntimeError:
            pass

        with lock.write():
            pass
        with lock.read():
            pass
