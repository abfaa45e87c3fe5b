"""Strings that carry their own effects without touching the long-term state."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

from .effects import Effect, EffectSet, EffectType, as_effect_set
from .state import TerminalStateGuard, get_top_code

__all__ = ["EffectString", "imbue"]


@dataclass
class _Segment:
    text: str = ""
    active: frozenset[EffectType] = field(default_factory=frozenset)


class EffectString:
    """Text with embedded effects that are undone right after the text.

    The effects only last for the text they were given with; once that text
    is printed the terminal goes back to whatever the stream's state guards
    set at that moment.
    """

    def __init__(self, effects: Union[Effect, EffectSet], *args: Any) -> None:
        effect_set = as_effect_set(effects)
        codes = []
        active = []
        for effect_type, code in effect_set.items():
            codes.append(code)
            active.append(effect_type)
        text = "".join(codes) + "".join(str(arg) for arg in args)
        self._segments: list[_Segment] = [_Segment(text, frozenset(active))]

    def _copy(self) -> "EffectString":
        clone = EffectString.__new__(EffectString)
        clone._segments = [_Segment(s.text, s.active) for s in self._segments]
        return clone

    def append(self, arg: Any) -> "EffectString":
        """Append ``arg`` (text or another effect string) and return self."""
        if isinstance(arg, EffectString):
            for segment in arg._segments:
                back = self._segments[-1]
                if back.active == segment.active:
                    back.text += segment.text
                else:
                    self._segments.append(_Segment(segment.text, segment.active))
            return self
        text = str(arg)
        back = self._segments[-1]
        if not back.active:
            back.text += text
        else:
            self._segments.append(_Segment(text))
        return self

    def __iadd__(self, other: Any) -> "EffectString":
        return self.append(other)

    def __add__(self, other: Any) -> "EffectString":
        return self._copy().append(other)

    def unsafe_string(self, stream: Any) -> str:
        """Return plain text with the escape codes embedded for ``stream``.

        The codes that end each segment restore what is in effect on
        ``stream`` right now, so the result is only right if it is written
        to that stream before any state guard on it changes.
        """
        parts = []
        for segment in self._segments:
            parts.append(segment.text)
            for effect_type in sorted(segment.active):
                parts.append(get_top_code(stream, effect_type))
        return "".join(parts)

    def write_to(self, stream: Any) -> TerminalStateGuard:
        """Write to ``stream`` and return the guard that the write started."""
        guard = TerminalStateGuard(stream)
        guard.write(self)
        return guard

    def __repr__(self) -> str:
        inner = ", ".join(
            f"({s.text!r}, {[t.name for t in sorted(s.active)]})" for s in self._segments
        )
        return f"EffectString([{inner}])"


def imbue(effects: Union[Effect, EffectSet], *args: Any) -> EffectString:
    """Build an :class:`EffectString` of ``args`` carrying ``effects``."""
    return EffectString(effects, *args)