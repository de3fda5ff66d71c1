"""Positioned text output and keyboard input for the full-screen menus."""

from __future__ import annotations

import re
import sys
from typing import TextIO

SCREEN_WIDTH = 119
FRAME_LEFT = 1
FRAME_RIGHT = 118
FRAME_ROWS = (1, 4, 23, 25)
MESSAGE_X = 8
MESSAGE_Y = 24
MESSAGE_WIDTH = 64

FORM_WITH_POSITION = 3
FORM_WITH_STATUS = 4

_INT = re.compile(r"\s*([+-]?\d+)")
_FLOAT = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def _half(value: int) -> int:
    """Halve, truncating toward zero."""
    return int(value / 2)


class Console:
    """A terminal addressed by 0-based column ``x`` and row ``y``."""

    def __init__(self, stdout: TextIO | None = None, stdin: TextIO | None = None) -> None:
        self._out = stdout if stdout is not None else sys.stdout
        self._in = stdin if stdin is not None else sys.stdin

    def goto(self, x: int, y: int) -> None:
        """Move the cursor to column ``x``, row ``y``."""
        self._out.write(f"\x1b[{y + 1};{x + 1}H")

    def write_at(self, x: int, y: int, text: str) -> None:
        """Write ``text`` starting at column ``x``, row ``y``."""
        self.goto(x, y)
        self._out.write(text)

    def write_centered(self, y: int, text: str) -> None:
        """Write ``text`` centred on the whole screen width."""
        self.write_at(_half(SCREEN_WIDTH) - _half(len(text)), y, text)

    def write_centered_between(self, x1: int, x2: int, y: int, text: str) -> None:
        """Write ``text`` centred between columns ``x1`` and ``x2``."""
        self.write_at(x1 + _half(x2 - x1) - _half(len(text)), y, text)

    def frame(self) -> None:
        """Clear the screen and draw the standard border and message line."""
        self._out.write("\x1b[2J\x1b[H")
        line = "-" * (FRAME_RIGHT - FRAME_LEFT + 1)
        for row in FRAME_ROWS:
            self.write_at(FRAME_LEFT, row, line)
        for row in range(1, 26):
            self.write_at(FRAME_LEFT, row, "|")
            self.write_at(FRAME_RIGHT, row, "|")
        for row in FRAME_ROWS:
            self.write_at(FRAME_LEFT, row, "+")
            self.write_at(FRAME_RIGHT, row, "+")
        self.write_at(2, 24, "MSG.:")

    def title(self, text: str) -> None:
        """Write the system name and a screen title at the top."""
        self.write_centered(2, "SISTEMA DE CONTROLE BANCARIO")
        self.write_centered(3, text)

    def account_form(self, mode: int) -> None:
        """Draw the account field labels.

        Mode 4 adds the status field; mode 3 adds the insert position field.
        """
        labels = (
            "  Codigo.............:",
            "1.Banco..............:",
            "2.Agencia............:",
            "3.Numero Conta.......:",
            "4.Tipo de Conta......:",
            "5.Saldo..............:",
            "6.Limite.............:",
        )
        for row, label in zip(range(6, 20, 2), labels):
            self.write_at(3, row, label)
        if mode == FORM_WITH_STATUS:
            self.write_at(3, 20, "7.Status da Conta:...:")
        if mode == FORM_WITH_POSITION:
            self.write_at(3, 22, "Posicao de cadastro:")

    def transaction_form(self) -> None:
        """Draw the labels of the debit and credit screen."""
        account_labels = (
            "Codigo da Conta........:",
            "Banco..................:",
            "Agencia................:",
            "Numero da Conta........:",
            "Tipo da conta..........:",
            "Saldo..................:",
            "Limite.................:",
            "Total Saldo + Limite...:",
        )
        movement_labels = (
            "1-Data Movimentacao....:",
            "2-Tipo Movimentacao....:",
            "3-Favorecido...........:",
            "4-Valor movimentacao...:",
            "1-Novo Saldo...........:",
        )
        for row, label in enumerate(account_labels, start=7):
            self.write_at(4, row, label)
        first_movement_row = 7 + len(account_labels) + 1
        for row, label in enumerate(movement_labels, start=first_movement_row):
            self.write_at(4, row, label)

    def transfer_form(self, x: int, y: int) -> None:
        """Draw one side of the transfer screen starting at ``x``, ``y``."""
        labels = (
            "Banco...........:",
            "Agencia.........:",
            "Numero da Conta.:",
            "Saldo...........:",
            "Limite..........:",
            "Saldo + Limite..:",
            "Novo Saldo......:",
        )
        for row, label in enumerate(labels, start=y):
            self.write_at(x, row, label)

    def _next_line(self) -> str:
        self._out.flush()
        line = self._in.readline()
        if not line:
            raise EOFError("no more input")
        return line

    def read_int(self) -> int | None:
        """Read an entry and return its leading integer, or None if it has none."""
        match = _INT.match(self._next_line())
        return int(match.group(1)) if match else None

    def read_float(self) -> float | None:
        """Read an entry and return its leading number, or None if it has none."""
        match = _FLOAT.match(self._next_line())
        return float(match.group(1)) if match else None

    def read_line(self, max_length: int) -> str:
        """Read a line of text holding at most ``max_length - 1`` characters."""
        return self._next_line().rstrip("\r\n")[: max(max_length - 1, 0)]

    def wait_key(self) -> None:
        """Wait until the user presses Enter; returns at once at end of input."""
        self._out.flush()
        self._in.readline()

    def message(self, text: str) -> None:
        """Write ``text`` on the message line."""
        self.write_at(MESSAGE_X, MESSAGE_Y, text)

    def clear_message(self) -> None:
        """Blank the message line."""
        self.write_at(MESSAGE_X, MESSAGE_Y, " " * MESSAGE_WIDTH)