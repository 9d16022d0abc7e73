"""Turns list UI events into cheese list mutations.

The page posts raw events (button clicks, editor actions, key presses, drag
moves and swipes). Events that are not meant to change anything are ignored
and reported as not handled.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from pagingsample.errors import ValidationError
from pagingsample.models.cheese import NAME_MAX_LENGTH, Cheese
from pagingsample.services.cheese_service import CheeseService

logger = logging.getLogger(__name__)

IME_ACTION_DONE = "done"
KEY_ACTION_DOWN = "down"
KEYCODE_ENTER = "enter"


@dataclass(frozen=True)
class GestureOutcome:
    handled: bool
    clear_input: bool = False
    cheese: Cheese | None = None


class GestureService:
    """Dispatch validated UI events to the cheese service."""

    def __init__(self, cheeses: CheeseService) -> None:
        self._cheeses = cheeses

    def handle(self, event: dict[str, Any]) -> GestureOutcome:
        kind = str(event.get("type"))
        if kind == "click_add":
            return self.add_cheese(event.get("text"))
        if kind == "editor_action":
            return self.on_editor_action(event.get("action_id"), event.get("text"))
        if kind == "key":
            return self.on_key(event.get("action"), event.get("key_code"), event.get("text"))
        if kind == "move":
            return self.on_move(int(event["from_position"]), int(event["to_position"]))
        if kind == "swipe":
            return self.on_swiped(int(event["cheese_id"]))

        logger.debug("Ignoring unknown UI event %r", kind)
        return GestureOutcome(handled=False)

    def add_cheese(self, text: str | None) -> GestureOutcome:
        new_cheese = (text or "").strip()
        if not new_cheese:
            return GestureOutcome(handled=True)
        if len(new_cheese) > NAME_MAX_LENGTH:
            raise ValidationError(
                message=f"Cheese name is longer than {NAME_MAX_LENGTH} characters",
                details={"text": [f"Got {len(new_cheese)} characters"]},
            )

        cheese = self._cheeses.insert(new_cheese).result()
        return GestureOutcome(handled=True, clear_input=True, cheese=cheese)

    def on_editor_action(self, action_id: str | None, text: str | None) -> GestureOutcome:
        if (action_id or "").lower() == IME_ACTION_DONE:
            return self.add_cheese(text)
        return GestureOutcome(handled=False)

    def on_key(self, action: str | None, key_code: str | None, text: str | None) -> GestureOutcome:
        if (action or "").lower() == KEY_ACTION_DOWN and (key_code or "").lower() == KEYCODE_ENTER:
            return self.add_cheese(text)
        return GestureOutcome(handled=False)

    def on_move(self, from_position: int, to_position: int) -> GestureOutcome:
        logger.info("swap %d:%d", from_position, to_position)
        swapped = self._cheeses.swap(from_position, to_position).result()
        return GestureOutcome(handled=bool(swapped))

    def on_swiped(self, cheese_id: int) -> GestureOutcome:
        removed = self._cheeses.remove(cheese_id).result()
        return GestureOutcome(handled=bool(removed))
