"""Marshmallow schemas for the cheese list."""

from __future__ import annotations

from marshmallow import EXCLUDE, Schema, fields, pre_load, validate

from pagingsample.models.cheese import NAME_MAX_LENGTH, SQL_INT_MAX

# List indices and ids must fit a SQL INTEGER.
ROW_INDEX = validate.Range(min=0, max=SQL_INT_MAX)
ROW_ID = validate.Range(min=1, max=SQL_INT_MAX)
CHEESE_NAME = validate.Length(min=1, max=NAME_MAX_LENGTH)


class CheeseSchema(Schema):
    """Serialize Cheese."""

    id = fields.Int(required=True)
    name = fields.Str(required=True)
    position = fields.Int(required=True)


class CheeseCreateSchema(Schema):
    """Validate create Cheese payload."""

    name = fields.Str(required=True, validate=CHEESE_NAME)

    @pre_load
    def _strip_name(self, data, **kwargs):  # type: ignore[no-untyped-def]
        if isinstance(data, dict) and isinstance(data.get("name"), str):
            data = dict(data)
            data["name"] = data["name"].strip()
        return data


class SwapSchema(Schema):
    """Two zero-based list indices to exchange."""

    from_position = fields.Int(required=True, validate=ROW_INDEX)
    to_position = fields.Int(required=True, validate=ROW_INDEX)


class PageQuerySchema(Schema):
    """Query string for a page load."""

    class Meta:
        # Cache-busters and other extra query params are not errors.
        unknown = EXCLUDE

    offset = fields.Int(required=False, load_default=0, validate=ROW_INDEX)
    limit = fields.Int(required=False, load_default=None, validate=validate.Range(min=1, max=SQL_INT_MAX))


class PageSchema(Schema):
    """Serialize one loaded window of the list."""

    items = fields.List(fields.Nested(CheeseSchema), required=True)
    offset = fields.Int(required=True)
    total_count = fields.Int(required=True)
    placeholders_before = fields.Int(required=True)
    placeholders_after = fields.Int(required=True)
    generation = fields.Int(required=True)
