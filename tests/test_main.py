import io
import itertools

from calcengine.__main__ import handle, main, run
from calcengine.errors import ErrorKind
from calcengine.programmer import NumberBase
from calcengine.session import CalculatorMode, SessionState
from calcengine.settings import Settings


class TestConsoleDriver:

    def run_lines(self, *lines):
        out = io.StringIO()
        state = run(lines, out)
        return state, out.getvalue().splitlines()

    def test_standard_calculation(self):
        state, output = self.run_lines("12", "+", "3", "=")
        assert output == ["12", "12+ 0", "12+ 3", "15"]
        assert state.display == "15"

    def test_error_is_shown_with_the_display(self):
        state, output = self.run_lines("6", "/", "0", "=")
        assert output[-1] == "6/ 0  ! DivisionByZero"
        assert state.error is ErrorKind.DIVISION_BY_ZERO

    def test_error_stays_until_the_delay_passes(self):
        ticks = itertools.count()
        out = io.StringIO()
        state = run(["6", "/", "0", "=", "1", "1", "1"], out,
                    Settings(error_clear_delay=2.5), clock=lambda: next(ticks))
        assert out.getvalue().splitlines()[-3:] == [
            "6/ 1  ! DivisionByZero", "6/ 11  ! DivisionByZero", "6/ 111"]
        assert state.error is None

    def test_zero_delay_drops_the_error_on_the_next_token(self):
        out = io.StringIO()
        state = run(["6", "/", "0", "=", "1"], out, Settings(error_clear_delay=0))
        assert out.getvalue().splitlines()[-1] == "6/ 1"
        assert state.error is None

    def test_clear_drops_a_pending_error(self):
        state, output = self.run_lines("6", "/", "0", "=", "C")
        assert output[-1] == "0"
        assert state.error is None

    def test_programmer_mode(self):
        state, output = self.run_lines("mode programmer", "255", "HEX", "not")
        assert output == ["[DEC] 0", "[DEC] 255", "[HEX] FF", "[HEX] FF FF FF 00"]
        assert state.base is NumberBase.HEX

    def test_hex_letters_are_digits_in_programmer_mode(self):
        state, _ = self.run_lines("mode programmer", "HEX", "e")
        assert state.display == "e"

    def test_scientific_and_converter(self):
        _, output = self.run_lines("mode scientific", "9", "sqrt", "mode converter",
                                   "category temperature", "to K", "convert")
        assert output[2] == "3"
        assert output[-1] == "276.15"

    def test_quit_stops_reading(self):
        _, output = self.run_lines("1", "quit", "2")
        assert output == ["1"]

    def test_handle_rejects_unknown_words(self):
        state = handle(SessionState(), "hello", Settings())
        assert state.error is ErrorKind.INVALID_INPUT
        assert state.mode is CalculatorMode.STANDARD

    def test_main(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("2\n*\n21\n=\n"))
        monkeypatch.delenv("CALCENGINE_LOG_LEVEL", raising=False)
        assert main() == 0
        assert capsys.readouterr().out.splitlines()[-1] == "42"

    def test_main_rejects_bad_settings(self, monkeypatch, capsys):
        monkeypatch.setenv("CALCENGINE_MAX_DISPLAY", "0")
        assert main() == 1
        assert "Fatal error" in capsys.readouterr().err
