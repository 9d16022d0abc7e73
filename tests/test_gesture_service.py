import pytest

from pagingsample.errors import ValidationError
from pagingsample.services.gesture_service import GestureService


@pytest.fixture()
def gestures(service) -> GestureService:
    return GestureService(service)


def test_add_trims_and_clears_input(gestures, snapshot):
    outcome = gestures.handle({"type": "click_add", "text": "  Brie  "})

    assert outcome.handled is True
    assert outcome.clear_input is True
    assert outcome.cheese.name == "Brie"
    assert snapshot() == [("Brie", 1)]


@pytest.mark.parametrize("text", ["", "   ", None])
def test_add_ignores_blank_text(gestures, snapshot, text):
    outcome = gestures.handle({"type": "click_add", "text": text})

    assert outcome.handled is True
    assert outcome.clear_input is False
    assert snapshot() == []


def test_editor_done_adds(gestures, snapshot):
    outcome = gestures.handle({"type": "editor_action", "action_id": "done", "text": "Comte"})
    assert outcome.clear_input is True
    assert snapshot() == [("Comte", 1)]


def test_editor_other_action_is_ignored(gestures, snapshot):
    outcome = gestures.handle({"type": "editor_action", "action_id": "next", "text": "Comte"})
    assert outcome.handled is False
    assert snapshot() == []


@pytest.mark.parametrize(
    ("action", "key_code", "expected"),
    [
        ("down", "enter", True),
        ("up", "enter", False),
        ("down", "tab", False),
    ],
)
def test_key_adds_only_on_enter_down(gestures, snapshot, action, key_code, expected):
    outcome = gestures.handle({"type": "key", "action": action, "key_code": key_code, "text": "Edam"})

    assert outcome.handled is expected
    assert (snapshot() == [("Edam", 1)]) is expected


def test_move_swaps_rows(gestures, make_cheeses, snapshot):
    make_cheeses("Asiago", "Brie", "Comte")

    outcome = gestures.handle({"type": "move", "from_position": 0, "to_position": 2})

    assert outcome.handled is True
    assert snapshot() == [("Comte", 1), ("Brie", 2), ("Asiago", 3)]


def test_move_onto_missing_row_is_not_handled(gestures, make_cheeses, snapshot):
    make_cheeses("Asiago")

    outcome = gestures.handle({"type": "move", "from_position": 0, "to_position": 4})

    assert outcome.handled is False
    assert snapshot() == [("Asiago", 1)]


def test_swipe_removes_row(gestures, make_cheeses, snapshot):
    asiago, _ = make_cheeses("Asiago", "Brie")

    outcome = gestures.handle({"type": "swipe", "cheese_id": asiago.id})

    assert outcome.handled is True
    assert snapshot() == [("Brie", 2)]


def test_unknown_event_type_is_ignored(gestures):
    assert gestures.handle({"type": "fling"}).handled is False


def test_add_rejects_name_over_column_length(gestures, snapshot):
    with pytest.raises(ValidationError):
        gestures.handle({"type": "click_add", "text": "x" * 201})
    assert snapshot() == []


def test_add_accepts_padded_name_at_column_length(gestures, snapshot):
    outcome = gestures.handle({"type": "click_add", "text": "  " + "x" * 200 + "  "})
    assert outcome.cheese.name == "x" * 200
