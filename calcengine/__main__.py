"""
Console driver for the calculator session.

One token per line:
  digits (``12``, ``FF`` in HEX), ``.``, ``+ - * / %``, ``=``, ``C``, ``back``
  ``mode standard|scientific|programmer|converter``
  scientific functions (``sin``, ``sqrt``, ``pi`` ...)
  programmer operations (``AND``, ``NOT``, ``HEX`` ...)
  ``category <key>``, ``from <symbol>``, ``to <symbol>``, ``convert``
  ``quit``
"""

from __future__ import annotations

import logging
import sys
import time
from dataclasses import replace
from typing import Callable, Iterable, Optional, TextIO

from calcengine import session
from calcengine.arithmetic import OPERATORS
from calcengine.logging_config import setup_logging
from calcengine.programmer import IntegerOperation
from calcengine.scientific import ScientificFunction
from calcengine.session import CalculatorMode, SessionState
from calcengine.settings import Settings

logger = logging.getLogger(__name__)

_FUNCTIONS = {f.value for f in ScientificFunction}
_INT_OPS = {op.value for op in IntegerOperation}
_UNIT_COMMANDS = {"category": session.select_category, "from": session.set_from_unit, "to": session.set_to_unit}


def handle(state: SessionState, token: str, settings: Settings) -> SessionState:
    """Apply one console token to ``state``."""
    word, _, arg = token.partition(" ")
    arg = arg.strip()
    if word == "mode": return session.set_mode(state, arg)
    if word in _UNIT_COMMANDS: return _UNIT_COMMANDS[word](state, arg)
    if token == "convert": return session.convert(state)
    if token == "=": return session.equals(state)
    if token == ".": return session.press_decimal(state)
    if token in ("C", "c"): return session.clear(state)
    if token == "back": return session.backspace(state)
    if token in OPERATORS: return session.press_operator(state, token)
    if state.mode is CalculatorMode.PROGRAMMER:
        if token.upper() in _INT_OPS: return session.apply_programmer(state, token.upper())
    elif token in _FUNCTIONS:
        return session.apply_scientific(state, token)
    for ch in token:
        state = session.press_digit(state, ch, settings)
        if state.error is not None: break
    return state


def render(state: SessionState) -> str:
    text = f"{state.equation} {state.display}".strip()
    if state.mode is CalculatorMode.PROGRAMMER: text = f"[{state.base.name}] {text}"
    if state.error is not None: text += f"  ! {state.error.value}"
    return text


def run(lines: Iterable[str], out: TextIO, settings: Optional[Settings] = None,
        clock: Callable[[], float] = time.monotonic) -> SessionState:
    """Feed ``lines`` to a fresh session, printing the display after each token.

    A recorded error stays on screen until ``settings.error_clear_delay``
    seconds have passed; it is dropped before the first token read after that.
    """
    settings = settings or Settings()
    state = SessionState()
    raised_at = 0.0
    for line in lines:
        token = line.strip()
        if not token: continue
        if token in ("quit", "exit"): break
        if state.error is not None and clock() - raised_at >= settings.error_clear_delay:
            state = session.clear_error(state)
        shown = state.error
        state = handle(session.clear_error(state), token, settings)
        if state.error is not None: raised_at = clock()
        # C clears the error along with the display
        elif shown is not None and token.upper() != "C": state = replace(state, error=shown)
        print(render(state), file=out)
    return state


def main() -> int:
    try:
        settings = Settings.from_env()
    except ValueError as exc:
        print(f"Fatal error: {exc}", file=sys.stderr); return 1
    setup_logging(settings.log_level)
    logger.debug("session started with %s", settings)
    run(sys.stdin, sys.stdout, settings)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
