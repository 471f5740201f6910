"""Jinja2 rendering for plain-text report blocks."""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Dict

from jinja2 import BaseLoader, Environment, StrictUndefined, Template

# autoescape stays off: output is terminal text, not HTML
_ENV = Environment(loader=BaseLoader(), trim_blocks=True, lstrip_blocks=True, undefined=StrictUndefined)


@lru_cache(maxsize=None)
def _compile(template: str) -> Template:
    return _ENV.from_string(template)


def render_template(template: str, context: Dict[str, Any]) -> str:
    """Render ``template`` with ``context``; unknown names raise UndefinedError."""
    return _compile(template).render(**context)


def render_block(template: str, context: Dict[str, Any]) -> str:
    """Render a report block without its trailing newlines."""
    return render_template(template, context).rstrip("\n")
