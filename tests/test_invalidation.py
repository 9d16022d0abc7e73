from pagingsample.invalidation import InvalidationTracker


def test_notify_bumps_generation_and_calls_observers():
    tracker = InvalidationTracker()
    seen: list[int] = []
    tracker.observe(seen.append)

    assert tracker.generation == 0
    assert tracker.notify() == 1
    assert tracker.notify() == 2
    assert seen == [1, 2]


def test_unsubscribe_stops_callbacks():
    tracker = InvalidationTracker()
    seen: list[int] = []
    unsubscribe = tracker.observe(seen.append)

    tracker.notify()
    unsubscribe()
    tracker.notify()

    assert seen == [1]


def test_failing_observer_does_not_block_others():
    tracker = InvalidationTracker()
    seen: list[int] = []

    def _boom(generation: int) -> None:
        raise RuntimeError("observer failed")

    tracker.observe(_boom)
    tracker.observe(seen.append)

    assert tracker.notify() == 1
    assert seen == [1]
