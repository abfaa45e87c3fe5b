import io
import re

import pytest

from iro.effects import DEFAULT_CODES, EffectType
from iro.examples import basic_example, main, more_complex_example
from iro.state import get_top_code, reset_registry

_ESCAPE = re.compile(r"\x1b\[\d+m")
_DEFAULTS = "".join(DEFAULT_CODES[t] for t in EffectType)


@pytest.fixture(autouse=True)
def _clean_registry():
    reset_registry()
    yield
    reset_registry()


def _strip(text):
    return _ESCAPE.sub("", text)


BASIC_LINES = [
    "this text is normal\n",
    "this text is blue\n",
    "this text is normal\n",
    "  this text is blue\n",
    "  this text is still blue\n",
    "    this text is red and underlined\n",
    "      this text is green and still underlined\n",
    "    this text is red and underlined again\n",
    "  this text is blue again\n",
    "this text is normal again\n",
]

COMPLEX_LINES = [
    "this text is normal\n",
    "this text is green\n",
    "this text is normal\n",
    "  this text is green and bold\n",
    "      this text is red\n",
    "          this text is green and bold\n",
    "              this text is red\n",
    "          this text is green and bold (now it's blue) and no it's green and bold again\n",
    "      this text is red\n",
    "  this text is green and bold\n",
    "this text is normal\n",
]


def test_basic_text():
    stream = io.StringIO()
    basic_example(stream)
    assert _strip(stream.getvalue()) == "".join(BASIC_LINES)


def test_basic_codes():
    stream = io.StringIO()
    basic_example(stream)
    out = stream.getvalue()
    assert out.startswith("this text is normal\n\x1b[94mthis text is blue\n")
    assert "\x1b[91m\x1b[4m    this text is red and underlined\n" in out
    assert (
        "\x1b[91m\x1b[49m\x1b[22m\x1b[4m\x1b[25m    this text is red and underlined again\n"
        in out
    )
    assert out.endswith(_DEFAULTS + "this text is normal again\n")


def test_basic_restores_state():
    stream = io.StringIO()
    basic_example(stream)
    for effect_type in EffectType:
        assert get_top_code(stream, effect_type) == DEFAULT_CODES[effect_type]


def test_complex_text():
    stream = io.StringIO()
    more_complex_example(stream)
    assert _strip(stream.getvalue()) == "".join(COMPLEX_LINES)


def test_complex_codes():
    stream = io.StringIO()
    more_complex_example(stream)
    out = stream.getvalue()
    assert (
        "          this text is green and bold \x1b[94m(now it's blue)\x1b[92m"
        " and no it's green and bold again\n" in out
    )
    assert out.endswith(_DEFAULTS + "this text is normal\n")


def test_complex_restores_state():
    stream = io.StringIO()
    more_complex_example(stream)
    for effect_type in EffectType:
        assert get_top_code(stream, effect_type) == DEFAULT_CODES[effect_type]


def test_main_basic(capsys):
    assert main(["basic"]) == 0
    assert _strip(capsys.readouterr().out) == "".join(BASIC_LINES)


def test_main_all(capsys):
    assert main([]) == 0
    assert _strip(capsys.readouterr().out) == "".join(BASIC_LINES + COMPLEX_LINES)


def test_main_rejects_unknown_example():
    with pytest.raises(SystemExit):
        main(["unknown"])