"""Per-stream stacks of terminal state guards.

Each output stream owns a stack of entries. The bottom entry holds the
terminal's default codes. Every live state guard owns one entry above it.
The code in effect for an effect type is the topmost entry that sets that
type. When both standard output and standard error are terminals they
share a single stack, because they share a single screen.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, Optional, Union

from .effects import DEFAULT_CODES, Effect, EffectSet, EffectType, as_effect_set

__all__ = [
    "TerminalStateGuard",
    "push_empty_state_guard",
    "push_state_guard",
    "copy_state_guard",
    "delete_state_guard",
    "set_effects",
    "get_top_code",
    "reset_registry",
    "styled",
    "EMPTY_STATE_GUARD_LOCATION",
]

#: Index of a guard that holds no entry (released, or never given one).
EMPTY_STATE_GUARD_LOCATION = 0

_CONSOLE_KEY = "console"


@dataclass
class _Entry:
    codes: list[Optional[str]]
    is_empty: bool = False
    is_destructed: bool = False

    @classmethod
    def defaults(cls) -> "_Entry":
        return cls([DEFAULT_CODES[t] for t in EffectType])

    @classmethod
    def empty(cls) -> "_Entry":
        return cls([None] * len(EffectType), is_empty=True)


@dataclass
class _Record:
    stream: Any
    stack: list[_Entry]


_registry: dict[object, _Record] = {}


def _isatty(stream: Any) -> bool:
    try:
        return bool(stream.isatty())
    except (AttributeError, ValueError, OSError):
        return False


def _console_is_shared() -> bool:
    return _isatty(sys.stdout) and _isatty(sys.stderr)


def _key(stream: Any) -> object:
    if (stream is sys.stdout or stream is sys.stderr) and _console_is_shared():
        return _CONSOLE_KEY
    return id(stream)


def _stack(stream: Any, *, create: bool = False) -> list[_Entry]:
    key = _key(stream)
    record = _registry.get(key)
    if record is None:
        if not create:
            raise KeyError("no state guards have been pushed for this stream")
        record = _Record(stream, [_Entry.defaults()])
        _registry[key] = record
    return record.stack


def _entry_at(stack: list[_Entry], index: int) -> _Entry:
    if not 0 <= index < len(stack):
        raise IndexError(f"no state guard at index {index}")
    return stack[index]


def _emit(stream: Any, code: str) -> None:
    stream.write(code)
    if _console_is_shared():
        if stream is sys.stdout:
            sys.stderr.write(code)
        elif stream is sys.stderr:
            sys.stdout.write(code)


def _set_code(stream: Any, index: int, effect_type: EffectType, code: str) -> None:
    stack = _stack(stream)
    entry = _entry_at(stack, index)
    entry.codes[effect_type] = code
    entry.is_empty = False
    if all(above.codes[effect_type] is None for above in stack[index + 1:]):
        _emit(stream, code)


def push_empty_state_guard(stream: Any) -> int:
    """Push an entry setting no effects and return its index."""
    stack = _stack(stream, create=True)
    stack.append(_Entry.empty())
    return len(stack) - 1


def push_state_guard(stream: Any, effects: Union[Effect, EffectSet]) -> int:
    """Push an entry for ``effects``, emit the codes that take hold, return its index."""
    effect_set = as_effect_set(effects)
    index = push_empty_state_guard(stream)
    for effect_type, code in effect_set.items():
        _set_code(stream, index, effect_type, code)
    return index


def copy_state_guard(stream: Any, index: int) -> int:
    """Push a new entry with the same codes as the one at ``index``."""
    entry = _entry_at(_stack(stream), index)
    codes = {t: c for t, c in zip(EffectType, entry.codes) if c is not None}
    return push_state_guard(stream, EffectSet(codes))


def delete_state_guard(stream: Any, index: int) -> None:
    """Remove the entry at ``index`` and re-emit the codes now in effect."""
    stack = _stack(stream)
    if index == EMPTY_STATE_GUARD_LOCATION:
        raise ValueError("the default entry cannot be deleted")
    entry = _entry_at(stack, index)
    entry.is_destructed = True
    if index == len(stack) - 1:
        # Entries below that were released earlier can only go once they top the stack.
        while stack and stack[-1].is_destructed:
            stack.pop()
    for effect_type in EffectType:
        _emit(stream, get_top_code(stream, effect_type))


def set_effects(stream: Any, index: int, effects: Union[Effect, EffectSet]) -> None:
    """Add ``effects`` to the entry at ``index``, emitting codes that take hold."""
    for effect_type, code in as_effect_set(effects).items():
        _set_code(stream, index, effect_type, code)


def get_top_code(stream: Any, effect_type: EffectType) -> str:
    """Return the code currently in effect for ``effect_type`` on ``stream``."""
    stack = _stack(stream, create=True)
    effect_type = EffectType(effect_type)
    for entry in reversed(stack):
        code = entry.codes[effect_type]
        if code is not None:
            return code
    raise LookupError(f"no code in effect for {effect_type.name}")


def reset_registry() -> None:
    """Forget every stream's stack."""
    _registry.clear()


class TerminalStateGuard:
    """Holds a set of effects on a stream for as long as it lives.

    Releasing the guard (leaving its ``with`` block, calling
    :meth:`delete_early`, or dropping the last reference to it) restores
    whatever the guards beneath it set.
    """

    def __init__(
        self, stream: Any, effects: Union[Effect, EffectSet, None] = None
    ) -> None:
        self._stream = stream
        self._index = EMPTY_STATE_GUARD_LOCATION
        if effects is None:
            self._index = push_empty_state_guard(stream)
        else:
            self._index = push_state_guard(stream, effects)

    @classmethod
    def _adopt(cls, stream: Any, index: int) -> "TerminalStateGuard":
        guard = cls.__new__(cls)
        guard._stream = stream
        guard._index = index
        return guard

    @property
    def stream(self) -> Any:
        """The stream this guard writes to."""
        return self._stream

    @property
    def index(self) -> int:
        """The guard's place in its stream's stack; 0 once released."""
        return self._index

    @property
    def released(self) -> bool:
        return self._index == EMPTY_STATE_GUARD_LOCATION

    def write(self, *args: Any) -> "TerminalStateGuard":
        """Write each argument; effects and effect sets are applied to this guard."""
        for arg in args:
            if isinstance(arg, (Effect, EffectSet)):
                self.apply(arg)
            elif hasattr(arg, "unsafe_string"):
                self._stream.write(arg.unsafe_string(self._stream))
            else:
                self._stream.write(str(arg))
        return self

    def apply(self, effects: Union[Effect, EffectSet]) -> "TerminalStateGuard":
        """Add effects to this guard."""
        if self.released:
            raise RuntimeError("the state guard has been released")
        set_effects(self._stream, self._index, effects)
        return self

    def copy(self) -> "TerminalStateGuard":
        """Return a new guard on the same stream holding the same effects."""
        return self._adopt(self._stream, copy_state_guard(self._stream, self._index))

    __copy__ = copy

    def assign(self, other: "TerminalStateGuard") -> "TerminalStateGuard":
        """Take a copy of ``other``'s effects, releasing what this guard held."""
        replacement = other.copy()
        self._stream, replacement._stream = replacement._stream, self._stream
        self._index, replacement._index = replacement._index, self._index
        replacement.delete_early()
        return self

    def delete_early(self) -> None:
        """Release the guard now; later calls do nothing."""
        if self._index != EMPTY_STATE_GUARD_LOCATION:
            index, self._index = self._index, EMPTY_STATE_GUARD_LOCATION
            delete_state_guard(self._stream, index)

    def __enter__(self) -> "TerminalStateGuard":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.delete_early()

    def __del__(self) -> None:
        if getattr(self, "_index", EMPTY_STATE_GUARD_LOCATION) == EMPTY_STATE_GUARD_LOCATION:
            return
        try:
            self.delete_early()
        except Exception:
            pass

    def __repr__(self) -> str:
        return f"TerminalStateGuard(index={self._index})"


def styled(stream: Any, effects: Union[Effect, EffectSet]) -> TerminalStateGuard:
    """Start a guard holding ``effects`` on ``stream``."""
    return TerminalStateGuard(stream, effects)