"""Cheese list routes (controllers). No business logic here."""

from __future__ import annotations

from flask import Blueprint, request

from pagingsample.db import get_session
from pagingsample.errors import NotFoundError
from pagingsample.extensions import get_cheese_service
from pagingsample.schemas.cheese import (
    CheeseCreateSchema,
    CheeseSchema,
    PageQuerySchema,
    PageSchema,
    SwapSchema,
)
from pagingsample.utils.responses import ok

cheeses_bp = Blueprint("cheeses", __name__)

_cheese_schema = CheeseSchema()
_create_schema = CheeseCreateSchema()
_swap_schema = SwapSchema()
_page_query_schema = PageQuerySchema()
_page_schema = PageSchema()


@cheeses_bp.get("/cheeses")
def list_cheeses():
    """Load one page of the ordered list."""

    query = _page_query_schema.load(request.args.to_dict())
    page = get_cheese_service().load_page(
        get_session(),
        offset=int(query["offset"]),
        limit=query.get("limit"),
    )
    return ok(_page_schema.dump(page))


@cheeses_bp.get("/cheeses/generation")
def list_generation():
    """Current change generation; clients reload when it moves."""

    return ok({"generation": get_cheese_service().tracker.generation})


@cheeses_bp.get("/cheeses/<int:cheese_id>")
def get_cheese(cheese_id: int):
    cheese = get_cheese_service().get_cheese(get_session(), cheese_id)
    return ok(_cheese_schema.dump(cheese))


@cheeses_bp.post("/cheeses")
def create_cheese():
    """Append a cheese at the end of the list."""

    payload = request.get_json(silent=True) or {}
    data = _create_schema.load(payload)

    cheese = get_cheese_service().insert(data["name"]).result()
    return ok(_cheese_schema.dump(cheese), status_code=201)


@cheeses_bp.delete("/cheeses/<int:cheese_id>")
def delete_cheese(cheese_id: int):
    removed = get_cheese_service().remove(cheese_id).result()
    if not removed:
        raise NotFoundError(message=f"Cheese {cheese_id} not found")
    return ok({"id": cheese_id, "removed": True})


@cheeses_bp.post("/cheeses/swap")
def swap_cheeses():
    """Exchange the positions of the rows at two list indices."""

    payload = request.get_json(silent=True) or {}
    data = _swap_schema.load(payload)

    swapped = get_cheese_service().swap(data["from_position"], data["to_position"]).result()
    if not swapped:
        raise NotFoundError(
            message="No cheese at one of the requested positions",
            details={"from_position": data["from_position"], "to_position": data["to_position"]},
        )
    return ok({"from_position": data["from_position"], "to_position": data["to_position"], "swapped": True})
