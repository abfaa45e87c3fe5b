import io

import pytest

from iro.effect_string import EffectString, imbue
from iro.effects import (
    DEFAULT_CODES,
    EffectSet,
    EffectType,
    bold,
    bright_blue,
    bright_red,
    green,
    red,
    underline,
)
from iro.state import TerminalStateGuard, get_top_code, reset_registry, styled

GREEN = "\x1b[32m"


@pytest.fixture(autouse=True)
def _clean_registry():
    reset_registry()
    yield
    reset_registry()


@pytest.fixture
def stream():
    return io.StringIO()


def test_single_effect_is_reset_to_default(stream):
    assert imbue(bright_blue, "x").unsafe_string(stream) == "\x1b[94mx\x1b[39m"


def test_arguments_are_concatenated(stream):
    assert imbue(bold, "a", 1, "b").unsafe_string(stream) == "\x1b[1ma1b\x1b[22m"


def test_effect_set_codes_in_type_order(stream):
    result = imbue(underline | bright_red, "hi").unsafe_string(stream)
    assert result == "\x1b[91m\x1b[4mhi\x1b[39m\x1b[24m"


def test_reset_uses_current_guard_code(stream):
    with styled(stream, green):
        result = imbue(red, "x").unsafe_string(stream)
    assert result == "\x1b[31mx" + GREEN


def test_plain_text_after_effects_is_unstyled(stream):
    es = imbue(red, "a") + "b"
    assert es.unsafe_string(stream) == "\x1b[31ma\x1b[39mb"


def test_same_effects_merge_into_one_segment(stream):
    es = imbue(red, "a") + imbue(red, "b")
    result = es.unsafe_string(stream)
    assert result == "\x1b[31ma\x1b[31mb\x1b[39m"
    assert result.count(DEFAULT_CODES[EffectType.FOREGROUND_COLOR]) == 1


def test_different_effects_keep_their_own_resets(stream):
    es = imbue(red, "a") + imbue(bold, "b")
    assert es.unsafe_string(stream) == "\x1b[31ma\x1b[39m\x1b[1mb\x1b[22m"


def test_no_effects_is_plain_text(stream):
    es = imbue(EffectSet(), "plain")
    es += "more"
    assert es.unsafe_string(stream) == "plainmore"


def test_add_leaves_original_unchanged(stream):
    original = imbue(red, "a")
    combined = original + "b"
    assert original.unsafe_string(stream) == "\x1b[31ma\x1b[39m"
    assert combined.unsafe_string(stream).endswith("b")


def test_append_returns_self_and_matches_iadd(stream):
    first = imbue(red, "a")
    assert first.append("b") is first
    second = imbue(red, "a")
    second += "b"
    assert first.unsafe_string(stream) == second.unsafe_string(stream)


def test_iadd_with_effect_string(stream):
    es = imbue(EffectSet(), "start ")
    es += imbue(bright_blue, "blue")
    assert es.unsafe_string(stream) == "start \x1b[94mblue\x1b[39m"


def test_constructor_matches_imbue(stream):
    assert EffectString(bold, "z").unsafe_string(stream) == imbue(bold, "z").unsafe_string(stream)


def test_invalid_effects_raise():
    with pytest.raises(TypeError):
        imbue("red", "x")


def test_write_to_writes_and_returns_guard(stream):
    guard = imbue(bright_blue, "x").write_to(stream)
    assert isinstance(guard, TerminalStateGuard)
    assert stream.getvalue() == "\x1b[94mx\x1b[39m"
    guard.delete_early()
    assert guard.released
    written = stream.getvalue()
    assert written.endswith("".join(DEFAULT_CODES[t] for t in EffectType))


def test_guard_write_uses_unsafe_string(stream):
    with styled(stream, green) as guard:
        guard.write(imbue(red, "r"))
        assert stream.getvalue() == GREEN + "\x1b[31mr" + GREEN


def test_effect_string_does_not_change_state(stream):
    with styled(stream, green):
        imbue(red, "x").write_to(stream).delete_early()
        assert get_top_code(stream, EffectType.FOREGROUND_COLOR) == GREEN