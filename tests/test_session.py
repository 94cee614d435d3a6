from dataclasses import replace

import pytest

from calcengine import session
from calcengine.errors import ErrorKind
from calcengine.programmer import NumberBase
from calcengine.session import CalculatorMode, SessionState
from calcengine.settings import Settings


def press(state, keys):
    for key in keys:
        state = session.press_digit(state, key)
    return state


@pytest.fixture
def programmer_state():
    return SessionState(mode=CalculatorMode.PROGRAMMER)


class TestEntry:

    def test_defaults(self, state):
        assert state.display == "0"
        assert state.equation == ""
        assert state.mode is CalculatorMode.STANDARD
        assert state.base is NumberBase.DEC
        assert (state.from_unit.symbol, state.to_unit.symbol) == ("km", "m")
        assert state.error is None

    def test_digits_replace_the_leading_zero(self, state):
        assert press(state, "012").display == "12"

    def test_transitions_do_not_mutate_the_input(self, state):
        session.press_digit(state, "7")
        assert state.display == "0"

    def test_display_length_is_capped(self, state):
        assert press(state, "1" * 20).display == "1" * 16
        short = Settings(max_display_length=3)
        s = state
        for key in "12345":
            s = session.press_digit(s, key, short)
        assert s.display == "123"

    def test_non_digit_is_rejected(self, state):
        assert session.press_digit(state, "x").error is ErrorKind.INVALID_INPUT

    def test_decimal_point_once(self, state):
        s = session.press_decimal(session.press_decimal(press(state, "1")))
        assert s.display == "1."
        assert s.has_decimal

    def test_backspace(self, state):
        s = session.backspace(session.press_decimal(press(state, "12")))
        assert s.display == "12"
        assert not s.has_decimal
        assert session.backspace(press(state, "5")).display == "0"

    def test_clear(self, state):
        s = session.clear(replace(press(state, "9"), equation="3+", error=ErrorKind.INVALID_INPUT))
        assert (s.display, s.equation, s.error) == ("0", "", None)

    def test_set_mode(self, state):
        assert session.set_mode(state, "scientific").mode is CalculatorMode.SCIENTIFIC
        assert session.set_mode(state, "graphing").error is ErrorKind.INVALID_OPERATION


class TestStandard:

    def test_operator_then_equals(self, state):
        s = session.press_operator(press(state, "12"), "+")
        assert (s.equation, s.display) == ("12+", "0")
        s = session.equals(press(s, "3"))
        assert (s.display, s.equation) == ("15", "")

    def test_decimal_result_sets_has_decimal(self, state):
        s = session.equals(press(session.press_operator(press(state, "1"), "/"), "4"))
        assert s.display == "0.25"
        assert s.has_decimal

    def test_division_by_zero_keeps_state(self, state):
        before = press(session.press_operator(press(state, "6"), "/"), "0")
        after = session.equals(before)
        assert after == replace(before, error=ErrorKind.DIVISION_BY_ZERO)

    def test_clear_error(self, state):
        s = session.equals(replace(state, equation="6/"))
        assert session.clear_error(s).error is None

    def test_equals_without_pending_operator_shows_operand(self, state):
        assert session.equals(press(state, "42")).display == "42"


class TestScientific:

    def test_function_replaces_display_and_clears_equation(self, state):
        s = session.apply_scientific(replace(state, display="16", equation="2+"), "sqrt")
        assert (s.display, s.equation) == ("4", "")

    def test_constant(self, state):
        assert session.apply_scientific(state, "pi").display == "3.14159265"

    def test_domain_error(self, state):
        s = session.apply_scientific(replace(state, display="-1"), "sqrt")
        assert s.error is ErrorKind.INVALID_RESULT
        assert s.display == "-1"

    def test_display_is_read_like_parse_float(self, state):
        assert session.apply_scientific(replace(state, display="3."), "square").display == "9"


class TestProgrammer:

    def test_base_switch_renders_in_the_new_base(self, programmer_state):
        s = session.apply_programmer(press(programmer_state, "255"), "HEX")
        assert (s.display, s.base) == ("FF", NumberBase.HEX)
        s = session.apply_programmer(s, "BIN")
        assert (s.display, s.base) == ("1111 1111", NumberBase.BIN)
        s = session.apply_programmer(s, "DEC")
        assert s.display == "255"

    def test_digits_are_checked_against_the_base(self, programmer_state):
        s = replace(programmer_state, base=NumberBase.BIN)
        assert session.press_digit(s, "2").error is ErrorKind.INVALID_INPUT
        hexa = replace(programmer_state, base=NumberBase.HEX)
        assert press(hexa, "fA").display == "fA"

    def test_decimal_point_ignored(self, programmer_state):
        assert session.press_decimal(programmer_state).display == "0"

    def test_second_operand_is_read_in_base_ten(self, programmer_state):
        # "10+" in the pending slot means ten even while the display is HEX
        s = replace(programmer_state, base=NumberBase.HEX, display="0F", equation="10+")
        s = session.apply_programmer(s, "AND")
        assert (s.display, s.equation) == ("0A", "")

    def test_missing_second_operand_counts_as_zero(self, programmer_state):
        s = replace(programmer_state, display="12")
        assert session.apply_programmer(s, "AND").display == "0"
        assert session.apply_programmer(s, "OR").display == "12"

    def test_not_twice(self, programmer_state):
        s = replace(programmer_state, base=NumberBase.HEX, display="00")
        s = session.apply_programmer(s, "NOT")
        assert s.display == "FF FF FF FF"
        assert session.apply_programmer(s, "NOT").display == "00"

    def test_shift(self, programmer_state):
        s = replace(programmer_state, base=NumberBase.BIN, display="0101")
        assert session.apply_programmer(s, "LSH").display == "1010"
        assert session.apply_programmer(s, "RSH").display == "0010"

    def test_invalid_display(self, programmer_state):
        s = session.apply_programmer(replace(programmer_state, display="3.5"), "NOT")
        assert s.error is ErrorKind.INVALID_INPUT

    def test_unknown_operation(self, programmer_state):
        assert session.apply_programmer(programmer_state, "NAND").error is ErrorKind.INVALID_OPERATION


class TestConverter:

    def test_select_category_resets_units(self, state):
        s = session.select_category(state, "temperature")
        assert (s.category, s.from_unit.symbol, s.to_unit.symbol) == ("temperature", "°C", "°F")

    def test_convert(self, state):
        s = replace(session.select_category(state, "temperature"), display="100")
        assert session.convert(s).display == "212"
        s = session.set_to_unit(s, "K")
        assert session.convert(s).display == "373.15"

    def test_convert_length(self, state):
        s = session.set_from_unit(replace(state, display="2.5"), "km")
        s = session.set_to_unit(s, "m")
        assert session.convert(s).display == "2500"

    def test_unknown_category_and_unit(self, state):
        assert session.select_category(state, "speed").error is ErrorKind.INVALID_INPUT
        assert session.set_from_unit(state, "°C").error is ErrorKind.INVALID_INPUT

    def test_unparseable_display(self, state):
        assert session.convert(replace(state, display="abc")).error is ErrorKind.INVALID_RESULT
