"""Demonstrations of state guards and effect strings."""

from __future__ import annotations

import argparse
import sys
from typing import Any, Optional, Sequence

from .effect_string import imbue
from .effects import (
    bold,
    bright_blue,
    bright_green,
    bright_red,
    normal_weight,
    underline,
)
from .state import TerminalStateGuard, styled

__all__ = ["basic_example", "more_complex_example", "main"]


def basic_example(stream: Any = None) -> None:
    """Nested guards, each restoring the effects beneath it when released."""
    out = sys.stdout if stream is None else stream
    out.write("this text is normal\n")
    with styled(out, bright_blue).write("this text is blue\n"):
        pass
    out.write("this text is normal\n")

    with styled(out, bright_blue).write("  this text is blue\n"):
        out.write("  this text is still blue\n")
        with styled(out, bright_red).apply(underline):
            out.write("    this text is red and underlined\n")
            with styled(out, bright_green):
                out.write("      this text is green and still underlined\n")
            out.write("    this text is red and underlined again\n")
        out.write("  this text is blue again\n")
    out.write("this text is normal again\n")


def more_complex_example(stream: Any = None) -> None:
    """Copies, assignment and effect strings alongside nested guards."""
    out = sys.stdout if stream is None else stream
    out.write("this text is normal\n")
    with styled(out, bright_green).write("this text is green\n"):
        pass
    out.write("this text is normal\n")

    with styled(out, bright_green).apply(bold) as tsg0:
        out.write("  this text is green and bold\n")
        with styled(out, normal_weight).apply(bright_red) as tsg1:
            out.write("      this text is red\n")
            with tsg0.copy():
                out.write("          this text is green and bold\n")
                with TerminalStateGuard(out) as tsg2:
                    tsg2.assign(tsg1)
                    out.write("              this text is red\n")
                out.write("          this text is green and bold ")
                with imbue(bright_blue, "(now it's blue)").write_to(out) as guard:
                    guard.write(" and no it's green and bold again\n")
            out.write("      this text is red\n")
        out.write("  this text is green and bold\n")
    out.write("this text is normal\n")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the chosen demonstration on standard output."""
    parser = argparse.ArgumentParser(prog="iro", description="Show terminal effects.")
    parser.add_argument(
        "example",
        nargs="?",
        choices=("basic", "complex", "all"),
        default="all",
        help="which demonstration to run",
    )
    args = parser.parse_args(argv)
    if args.example in ("basic", "all"):
        basic_example(sys.stdout)
    if args.example in ("complex", "all"):
        more_complex_example(sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())