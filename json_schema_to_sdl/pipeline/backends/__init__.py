"""
Backends - SDL declaration rendering.
"""

from __future__ import annotations

from .sdl_builders import EnumBuilder, SdlField, SdlRenderer, TypeBuilder, UnionBuilder

__all__ = [
    "EnumBuilder",
    "SdlField",
    "SdlRenderer",
    "TypeBuilder",
    "UnionBuilder",
]
