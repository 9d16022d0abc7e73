import logging

import pytest

from pagingsample.errors import NotFoundError
from pagingsample.repositories.cheese_repository import CheeseRepository
from pagingsample.services.cheese_service import CheeseService


def test_insert_into_empty_list_starts_at_position_one(service, snapshot):
    cheese = service.insert("Brie").result()

    assert cheese.id is not None
    assert cheese.position == 1
    assert snapshot() == [("Brie", 1)]


def test_insert_appends_after_highest_position(service, make_cheeses, snapshot):
    make_cheeses("Brie", "Comte", "Edam", positions=[1, 2, 7])

    cheese = service.insert("Feta").result()

    assert cheese.position == 8
    assert snapshot()[-1] == ("Feta", 8)


def test_insert_stores_text_as_given(service, snapshot):
    service.insert("  Gouda ").result()
    assert snapshot() == [("  Gouda ", 1)]


def test_remove_deletes_row(service, make_cheeses, snapshot):
    brie, comte = make_cheeses("Brie", "Comte")

    assert service.remove(brie.id).result() is True
    assert snapshot() == [("Comte", 2)]


def test_remove_missing_row_is_a_no_op(service, make_cheeses, snapshot, tracker):
    make_cheeses("Brie")

    assert service.remove(999).result() is False
    assert snapshot() == [("Brie", 1)]
    assert tracker.generation == 0


def test_swap_exchanges_positions_and_leaves_others(service, make_cheeses, snapshot):
    make_cheeses("Asiago", "Brie", "Comte", "Derby")

    assert service.swap(1, 3).result() is True

    assert snapshot() == [("Asiago", 1), ("Derby", 2), ("Comte", 3), ("Brie", 4)]


def test_swap_uses_list_indices_when_positions_have_gaps(service, make_cheeses, snapshot):
    make_cheeses("Asiago", "Brie", "Comte", positions=[3, 10, 40])

    assert service.swap(0, 2).result() is True

    assert snapshot() == [("Comte", 3), ("Brie", 10), ("Asiago", 40)]


def test_swap_with_missing_index_changes_nothing(service, make_cheeses, snapshot, tracker):
    make_cheeses("Asiago", "Brie")

    assert service.swap(0, 5).result() is False
    assert snapshot() == [("Asiago", 1), ("Brie", 2)]
    assert tracker.generation == 0


def test_swap_same_index_keeps_row_in_place(service, make_cheeses, snapshot):
    make_cheeses("Asiago", "Brie")

    assert service.swap(1, 1).result() is True
    assert snapshot() == [("Asiago", 1), ("Brie", 2)]


def test_each_committed_mutation_bumps_generation(service, make_cheeses, tracker):
    make_cheeses("Asiago", "Brie")
    seen: list[int] = []
    tracker.observe(seen.append)

    service.insert("Comte").result()
    service.swap(0, 1).result()
    service.remove(1).result()

    assert tracker.generation == 3
    assert seen == [1, 2, 3]


def test_failed_mutation_rolls_back_and_raises(session_factory, executor, tracker, snapshot):
    class _FailingRepository(CheeseRepository):
        def insert(self, session, name, position):
            super().insert(session, name, position)
            raise RuntimeError("disk full")

    failing = CheeseService(
        session_factory=session_factory,
        executor=executor,
        tracker=tracker,
        repository=_FailingRepository(),
    )

    with pytest.raises(RuntimeError, match="disk full"):
        failing.insert("Brie").result()

    assert snapshot() == []
    assert tracker.generation == 0


def test_load_page_reports_window_and_placeholders(service, make_cheeses, db_session):
    make_cheeses("Asiago", "Brie", "Comte", "Derby", "Edam")

    page = service.load_page(db_session, offset=2, limit=2)

    assert [c.name for c in page.items] == ["Comte", "Derby"]
    assert page.total_count == 5
    assert page.placeholders_before == 2
    assert page.placeholders_after == 1


def test_load_page_initial_load_uses_size_hint(service, make_cheeses, db_session):
    make_cheeses("Asiago", "Brie", "Comte", "Derby", "Edam", "Feta", "Gouda", "Havarti")

    # page_size=2 -> initial hint of 6 rows
    page = service.load_page(db_session)

    assert len(page.items) == 6
    assert page.placeholders_after == 2


def test_load_page_past_end_is_empty(service, make_cheeses, db_session):
    make_cheeses("Asiago")

    page = service.load_page(db_session, offset=10)

    assert list(page.items) == []
    assert page.total_count == 1


def test_get_cheese_raises_not_found(service, db_session):
    with pytest.raises(NotFoundError):
        service.get_cheese(db_session, 42)


def test_failed_swap_keeps_both_positions(session_factory, executor, tracker, make_cheeses, snapshot):
    class _FailingRepository(CheeseRepository):
        def update(self, session, *cheeses):
            super().update(session, *cheeses)
            raise RuntimeError("write lost")

    make_cheeses("Asiago", "Brie", "Comte")
    failing = CheeseService(
        session_factory=session_factory,
        executor=executor,
        tracker=tracker,
        repository=_FailingRepository(),
    )

    with pytest.raises(RuntimeError, match="write lost"):
        failing.swap(0, 2).result()

    assert snapshot() == [("Asiago", 1), ("Brie", 2), ("Comte", 3)]
    assert tracker.generation == 0


def test_swap_logs_both_rows_before_and_after(service, make_cheeses, caplog):
    make_cheeses("Asiago", "Brie")

    with caplog.at_level(logging.INFO, logger="pagingsample.services.cheese_service"):
        service.swap(0, 1).result()

    messages = [r.getMessage() for r in caplog.records if r.name == "pagingsample.services.cheese_service"]
    assert "Swapping Asiago:1 with Brie:2" in messages
    assert "Swapped Asiago:2 with Brie:1" in messages


def test_swap_and_remove_with_huge_values_are_no_ops(service, make_cheeses, snapshot, tracker):
    make_cheeses("Asiago", "Brie")

    assert service.swap(0, 10**20).result() is False
    assert service.remove(10**20).result() is False
    assert snapshot() == [("Asiago", 1), ("Brie", 2)]
    assert tracker.generation == 0
