"""Web page routes."""

from __future__ import annotations

from flask import Blueprint, Response, render_template

from pagingsample.extensions import get_cheese_service


web_bp = Blueprint("web", __name__)


@web_bp.get("/")
def index():
    paging = get_cheese_service().paging
    return render_template(
        "index.html",
        page_size=paging.page_size,
        enable_placeholders=paging.enable_placeholders,
    )


@web_bp.get("/favicon.ico")
def favicon() -> Response:
        svg = """<svg xmlns='http://www.w3.org/2000/svg' viewBox='0 0 64 64'>
    <path d='M6 44 L58 20 L58 48 L6 48 Z' fill='#f6c945' stroke='#b8860b' stroke-width='2'/>
    <circle cx='22' cy='40' r='4' fill='#e0a800'/>
    <circle cx='40' cy='32' r='5' fill='#e0a800'/>
    <circle cx='50' cy='42' r='3' fill='#e0a800'/>
</svg>"""

        return Response(svg, mimetype="image/svg+xml")
