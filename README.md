# iro

Scoped ANSI colours and text effects for terminal output. When you set a
colour or effect, you get back a state guard. When that guard ends, the
terminal goes back to what it was before. Guards can be nested. When an
inner guard ends, the effects of the outer guard come back by themselves,
so you never write a reset code by hand.

The package has no dependencies beyond the standard library.

## Effects

`iro.effects` defines the effects. Each one is an `Effect`, which holds an
escape `code` and an `effect_type`. There are five effect types in
`EffectType`:

- `FOREGROUND_COLOR`: `black`, `red`, `green`, `yellow`, `blue`, `magenta`,
  `cyan`, `white`, and `bright_` forms of each of these. `gray` and `grey`
  are other names for `bright_black`.
- `BACKGROUND_COLOR`: the same colours with a `background_` prefix, for
  example `background_red` or `background_bright_cyan`. `background_gray`
  and `background_grey` are other names for `background_bright_black`.
- `FONT_WEIGHT`: `bold`, `faint`, `normal_weight`.
- `UNDERLINEDNESS`: `underlined` (also called `underline`), `not_underlined`.
- `BLINK`: `blinking`, `not_blinking`.

`DEFAULT_CODES` maps each effect type to the code that restores the
terminal's default for that type.

### Combining effects

Join effects with `|` to get an `EffectSet`. A set holds at most one code
for each effect type. How a clash is settled depends on the operands:

- `Effect | Effect` and `EffectSet | Effect` or `EffectSet`: the right-hand
  operand wins.
- `Effect | EffectSet`: the effect on the left is used only if the set has
  nothing of that type yet.

```python
from iro.effects import EffectType, bold, bright_red, underline

effects = bright_red | bold | underline
effects.code_for(EffectType.FONT_WEIGHT)   # '\x1b[1m'
list(effects.items())                      # [(EffectType.FOREGROUND_COLOR, ...), ...]
```

`EffectSet(...)` takes any mix of effects, effect sets and mappings from
effect type to code. `|=` changes a set in place. `as_effect_set(value)`
turns an effect, an effect set or an iterable of effects into a set, and
raises `TypeError` for anything else.

## State guards

`iro.state.styled(stream, effects)` starts a `TerminalStateGuard` on any
object with a `write` method, such as `sys.stdout`. It writes the codes that
take hold at once. When the guard ends, it writes the codes that are in
effect again.

```python
import sys
from iro.effects import bright_blue, bright_green, underline
from iro.state import styled

with styled(sys.stdout, bright_blue) as guard:
    guard.write("this text is blue\n")
    with styled(sys.stdout, bright_green | underline):
        sys.stdout.write("green and underlined\n")
    sys.stdout.write("blue again\n")
sys.stdout.write("normal again\n")
```

A guard ends when its `with` block ends, when `delete_early()` is called,
or when the last reference to it is dropped. `TerminalStateGuard(stream)`
with no effects starts a guard that sets nothing yet. Guards also have these
methods and properties:

- `write(*args)` writes each argument. Effects and effect sets are added to
  the guard. An `EffectString` is written with its codes built in. Anything
  else is written as `str(arg)`. It returns the guard, so calls can be
  chained.
- `apply(effects)` adds effects to the guard. It raises `RuntimeError` if
  the guard has already ended.
- `copy()` starts a new guard on the same stream with the same effects.
  `copy.copy` does the same.
- `assign(other)` drops the guard's own effects and takes a copy of those of
  `other`.
- `delete_early()` ends the guard. Calling it again does nothing.
- `stream`, `index` and `released` give the guard's stream, its place in the
  stream's stack, and whether it has ended.

Each stream keeps its own stack of guards. An effect type takes its code
from the topmost guard that sets it, so a guard can end even when it is not
on top. When `sys.stdout` and `sys.stderr` are both terminals, they share a
single stack, and each code is written to both of them, because they draw
on the same screen.

`iro.state` also has the low-level stack functions that guards are built
on: `push_empty_state_guard`, `push_state_guard`, `copy_state_guard`,
`delete_state_guard`, `set_effects` and `get_top_code`. `reset_registry()`
clears every stream's stack.

## Effect strings

`iro.effect_string.imbue(effects, *args)` builds an `EffectString`. It is
the same as `EffectString(effects, *args)`. The arguments are joined as text
and the effects apply to that text only. After that text, the codes that the
stream's guards have in effect are written again.

```python
import sys
from iro.effects import bright_blue
from iro.effect_string import imbue

text = imbue(bright_blue, "(highlighted)") + " plain text after"
with text.write_to(sys.stdout):
    pass
```

`write_to(stream)` writes the string and returns the guard that the write
started. `append(arg)`, `+=` and `+` add plain text or another effect
string.

`unsafe_string(stream)` returns plain text with the escape codes built in.
It reads the codes in effect on `stream` at the moment you call it. Print
the result only to that stream, and only before any guard on that stream
changes.

## Limits

Codes are always written. The package does not check whether a stream is a
terminal before it writes them, and it does not remove them when the output
goes to a file or a pipe. It writes ANSI escape codes only and has no
support for other console interfaces.

## Demo

To see nested guards, copies, assignment and effect strings in your
terminal, run:

```
iro-demo
```

`iro-demo basic` and `iro-demo complex` run one demonstration only. The
default, `all`, runs both. The same demonstrations are available as
`iro.examples.basic_example(stream)` and
`iro.examples.more_complex_example(stream)`.