"""UI event routes (controllers). No business logic here."""

from __future__ import annotations

from flask import Blueprint, request

from pagingsample.extensions import get_gesture_service
from pagingsample.schemas.gesture import GestureEventSchema, GestureOutcomeSchema
from pagingsample.utils.responses import ok

gestures_bp = Blueprint("gestures", __name__)

_event_schema = GestureEventSchema()
_outcome_schema = GestureOutcomeSchema()


@gestures_bp.post("/gestures")
def handle_gesture():
    payload = request.get_json(silent=True) or {}
    event = _event_schema.load(payload)

    outcome = get_gesture_service().handle(event)
    return ok(_outcome_schema.dump(outcome))
