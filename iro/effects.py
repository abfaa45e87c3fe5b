"""Terminal effects (colours, weight, underline, blink) and sets of them."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Optional, Union

__all__ = [
    "EffectType",
    "Effect",
    "EffectSet",
    "as_effect_set",
    "DEFAULT_CODES",
]


class EffectType(enum.IntEnum):
    """The independent kinds of effect a terminal can carry at once."""

    FOREGROUND_COLOR = 0
    BACKGROUND_COLOR = 1
    FONT_WEIGHT = 2
    UNDERLINEDNESS = 3
    BLINK = 4


#: Codes that restore each effect type to the terminal's default.
DEFAULT_CODES: Mapping[EffectType, str] = {
    EffectType.FOREGROUND_COLOR: "\x1b[39m",
    EffectType.BACKGROUND_COLOR: "\x1b[49m",
    EffectType.FONT_WEIGHT: "\x1b[22m",
    EffectType.UNDERLINEDNESS: "\x1b[24m",
    EffectType.BLINK: "\x1b[25m",
}


@dataclass(frozen=True)
class Effect:
    """A single escape code together with the kind of effect it sets."""

    code: str
    effect_type: EffectType

    def __or__(self, other: object) -> "EffectSet":
        if isinstance(other, Effect):
            return EffectSet(self, other)
        if isinstance(other, EffectSet):
            # An effect on the left never overrides one already in the set.
            if other.code_for(self.effect_type) is not None:
                return EffectSet(other)
            return other | self
        return NotImplemented

    def __str__(self) -> str:
        return self.code


EffectLike = Union[Effect, "EffectSet", Mapping[EffectType, str]]


class EffectSet:
    """At most one effect per effect type."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, *args: EffectLike) -> None:
        self._codes: list[Optional[str]] = [None] * len(EffectType)
        for arg in args:
            self._merge(arg)

    def _merge(self, arg: EffectLike) -> None:
        if isinstance(arg, Effect):
            self._codes[arg.effect_type] = arg.code
        elif isinstance(arg, EffectSet):
            for effect_type, code in arg.items():
                self._codes[effect_type] = code
        elif isinstance(arg, Mapping):
            for effect_type, code in arg.items():
                if code:
                    self._codes[EffectType(effect_type)] = code
        else:
            raise TypeError(f"cannot build an effect set from {type(arg).__name__}")

    def __or__(self, other: object) -> "EffectSet":
        if not isinstance(other, (Effect, EffectSet)):
            return NotImplemented
        result = EffectSet(self)
        result._merge(other)
        return result

    def __ror__(self, other: object) -> "EffectSet":
        if not isinstance(other, Effect):
            return NotImplemented
        if self.code_for(other.effect_type) is not None:
            return EffectSet(self)
        return self | other

    def __ior__(self, other: object) -> "EffectSet":
        if not isinstance(other, (Effect, EffectSet)):
            return NotImplemented
        self._merge(other)
        return self

    def code_for(self, effect_type: EffectType) -> Optional[str]:
        """Return the code set for ``effect_type``, or None if it is unset."""
        return self._codes[EffectType(effect_type)]

    def items(self) -> Iterator[tuple[EffectType, str]]:
        """Yield ``(effect_type, code)`` for every set type, in type order."""
        for effect_type in EffectType:
            code = self._codes[effect_type]
            if code is not None:
                yield effect_type, code

    def __len__(self) -> int:
        return sum(1 for _ in self.items())

    def __bool__(self) -> bool:
        return any(code is not None for code in self._codes)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Effect):
            other = EffectSet(other)
        if not isinstance(other, EffectSet):
            return NotImplemented
        return self._codes == other._codes

    def __repr__(self) -> str:
        inner = ", ".join(f"{t.name}={c!r}" for t, c in self.items())
        return f"EffectSet({inner})"


def as_effect_set(value: Union[Effect, EffectSet, Iterable[Effect]]) -> EffectSet:
    """Turn an effect, an effect set or an iterable of effects into an effect set."""
    if isinstance(value, EffectSet):
        return value
    if isinstance(value, Effect):
        return EffectSet(value)
    if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
        raise TypeError(f"not an effect or effect set: {value!r}")
    items = list(value)
    if not all(isinstance(item, Effect) for item in items):
        raise TypeError(f"not an effect or effect set: {value!r}")
    return EffectSet(*items)


def _make(code: str, effect_type: EffectType) -> Effect:
    return Effect(code, effect_type)


_FG = EffectType.FOREGROUND_COLOR
_BG = EffectType.BACKGROUND_COLOR

black = _make("\x1b[30m", _FG)
red = _make("\x1b[31m", _FG)
green = _make("\x1b[32m", _FG)
yellow = _make("\x1b[33m", _FG)
blue = _make("\x1b[34m", _FG)
magenta = _make("\x1b[35m", _FG)
cyan = _make("\x1b[36m", _FG)
white = _make("\x1b[37m", _FG)

bright_black = _make("\x1b[90m", _FG)
gray = bright_black
grey = bright_black
bright_red = _make("\x1b[91m", _FG)
bright_green = _make("\x1b[92m", _FG)
bright_yellow = _make("\x1b[93m", _FG)
bright_blue = _make("\x1b[94m", _FG)
bright_magenta = _make("\x1b[95m", _FG)
bright_cyan = _make("\x1b[96m", _FG)
bright_white = _make("\x1b[97m", _FG)

background_black = _make("\x1b[40m", _BG)
background_red = _make("\x1b[41m", _BG)
background_green = _make("\x1b[42m", _BG)
background_yellow = _make("\x1b[43m", _BG)
background_blue = _make("\x1b[44m", _BG)
background_magenta = _make("\x1b[45m", _BG)
background_cyan = _make("\x1b[46m", _BG)
background_white = _make("\x1b[47m", _BG)

background_bright_black = _make("\x1b[100m", _BG)
background_gray = background_bright_black
background_grey = background_bright_black
background_bright_red = _make("\x1b[101m", _BG)
background_bright_green = _make("\x1b[102m", _BG)
background_bright_yellow = _make("\x1b[103m", _BG)
background_bright_blue = _make("\x1b[104m", _BG)
background_bright_magenta = _make("\x1b[105m", _BG)
background_bright_cyan = _make("\x1b[106m", _BG)
background_bright_white = _make("\x1b[107m", _BG)

bold = _make("\x1b[1m", EffectType.FONT_WEIGHT)
faint = _make("\x1b[2m", EffectType.FONT_WEIGHT)
normal_weight = _make("\x1b[22m", EffectType.FONT_WEIGHT)

underlined = _make("\x1b[4m", EffectType.UNDERLINEDNESS)
underline = underlined
not_underlined = _make("\x1b[24m", EffectType.UNDERLINEDNESS)

blinking = _make("\x1b[5m", EffectType.BLINK)
not_blinking = _make("\x1b[25m", EffectType.BLINK)