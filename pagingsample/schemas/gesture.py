"""Schemas for list UI events."""

from __future__ import annotations

from marshmallow import Schema, ValidationError, fields, validate, validates_schema

from pagingsample.models.cheese import NAME_MAX_LENGTH
from pagingsample.schemas.cheese import ROW_ID, ROW_INDEX, CheeseSchema

EVENT_TYPES = ["click_add", "editor_action", "key", "move", "swipe"]

_REQUIRED_BY_TYPE = {
    "click_add": ("text",),
    "editor_action": ("text", "action_id"),
    "key": ("text", "action", "key_code"),
    "move": ("from_position", "to_position"),
    "swipe": ("cheese_id",),
}


class GestureEventSchema(Schema):
    type = fields.String(required=True, validate=validate.OneOf(EVENT_TYPES))

    text = fields.String(required=False, allow_none=True)
    action_id = fields.String(required=False)
    action = fields.String(required=False)
    key_code = fields.String(required=False)

    from_position = fields.Integer(required=False, validate=ROW_INDEX)
    to_position = fields.Integer(required=False, validate=ROW_INDEX)
    cheese_id = fields.Integer(required=False, validate=ROW_ID)

    @validates_schema
    def _validate_fields_for_type(self, data, **kwargs):  # type: ignore[no-untyped-def]
        missing = [name for name in _REQUIRED_BY_TYPE.get(data.get("type"), ()) if name not in data]
        if missing:
            raise ValidationError({name: [f"Required for {data.get('type')} events"] for name in missing})

        text = data.get("text")
        if isinstance(text, str) and len(text.strip()) > NAME_MAX_LENGTH:
            raise ValidationError({"text": [f"Longer than maximum length {NAME_MAX_LENGTH}."]})


class GestureOutcomeSchema(Schema):
    handled = fields.Boolean(required=True)
    clear_input = fields.Boolean(required=True)
    cheese = fields.Nested(CheeseSchema, allow_none=True)
