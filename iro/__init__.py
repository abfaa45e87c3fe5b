"""Scoped, nestable ANSI terminal effects that restore themselves."""

__version__ = "0.1.0"
__all__ = ["effects", "state", "effect_string", "examples"]