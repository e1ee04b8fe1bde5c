"""
SDL declaration builders.

Each builder renders one declaration (type, enum or union) through a
jinja2 template and returns its lines for the output buffer.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import jinja2

from ...utils import camel_case, last_case_word, snake_case
from ..analyzer.type_mapper import TypeMapper
from ..analyzer.work_items import EnumWork, UnionWork

TEMPLATES_DIR = Path(__file__).parent.resolve().absolute() / "templates"

_INTEGER_PATTERN = re.compile(r"[+-]?\d+")

_LINE_BREAK_PATTERN = re.compile(r"\r\n|\r|\n")

_TRAILING_LINE_BREAK_PATTERN = re.compile(r"(\r\n|\r|\n)\Z")


def sdl_description(text: str) -> str:
    """Flatten a description into a single-line SDL string body."""
    text = _TRAILING_LINE_BREAK_PATTERN.sub("", text, count=1)
    text = _LINE_BREAK_PATTERN.sub(" ", text)
    return text.replace("\\", "\\\\").replace('"', '\\"')


@dataclass
class SdlField:
    """A field line of an object type."""

    name: str
    type: str
    required: bool = False
    description: str | None = None


class SdlRenderer:
    """Holds the jinja2 environment and the declaration templates."""

    def __init__(self):
        self.jinja_env = jinja2.Environment(lstrip_blocks=True, trim_blocks=True)
        self.jinja_env.filters["camel_case"] = camel_case
        self.jinja_env.filters["sdl_description"] = sdl_description
        self.templates = {
            kind: self.jinja_env.from_string((TEMPLATES_DIR / f"{kind}.graphql.jinja2").read_text(encoding="utf-8"))
            for kind in ("type", "enum", "union")
        }

    def render(self, kind: str, **context: Any) -> list[str]:
        return self.templates[kind].render(**context).splitlines()


class TypeBuilder:
    """Builds `type` declarations."""

    def __init__(self, renderer: SdlRenderer):
        self.renderer = renderer

    def build_type(self, id: str, fields: list[SdlField]) -> list[str]:
        return self.renderer.render("type", name=id, fields=fields)


class EnumBuilder:
    """Builds `enum` declarations from queued enum work."""

    def __init__(self, renderer: SdlRenderer):
        self.renderer = renderer

    def build_enum(self, work: EnumWork) -> list[str]:
        members = [self.member_name(work.id, value) for value in work.values]
        return self.renderer.render("enum", name=work.id, members=members)

    @staticmethod
    def member_name(id: str, value: Any) -> str:
        """
        Name an enum member.

        Numeric values are prefixed with the last word of the enum name
        ("PetStatusCode", 404 -> "Code404"); anything else is upper snake-cased.
        """
        if _is_numeric(value):
            suffix = re.sub(r"[^0-9A-Za-z_]", "_", str(value))
            return f"{last_case_word(id)}{suffix}"
        return snake_case(str(value))


class UnionBuilder:
    """Builds `union` declarations from queued union work."""

    def __init__(self, renderer: SdlRenderer, type_mapper: TypeMapper):
        self.renderer = renderer
        self.type_mapper = type_mapper

    def build_union(self, work: UnionWork) -> list[str]:
        # Anonymous shapes inside members get no synthesized name
        members = [self.type_mapper.resolve_type(member, "") for member in work.members]
        return self.renderer.render("union", name=work.id, members=members)


def _is_numeric(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return True
    return isinstance(value, str) and _INTEGER_PATTERN.fullmatch(value) is not None
