"""Parameter list parser for catalog signatures.

Recovers ``name``, ``type`` and ``default`` for each formal parameter from the
text between a command's parentheses, e.g.
``x%, y:Float = 1.5, label$ = "a, b"``.  The text is consumed one character
at a time by a small state machine; commas inside a quoted default do not
split parameters.
"""

from __future__ import annotations

from enum import Enum

from blitzdoc.config.types import type_for_sigil
from blitzdoc.core.catalog.model import Param

class ParseState(Enum):
    """Which part of the current parameter is being read."""

    NAME = "name"
    TYPE = "type"
    DEFAULT = "default"

class ParamParser:
    """Character-driven state machine producing :class:`Param` records.

    A new :class:`Param` is created lazily on the first character of every
    comma-delimited segment and kept in :attr:`current` until the next
    segment starts.  The last parameter needs no terminator.
    """

    def __init__(self) -> None:
        self.params: list[Param] = []
        self.state = ParseState.NAME
        self.in_string = False
        self.current: Param | None = None
        self._start_new = True

    def feed(self, text: str) -> list[Param]:
        """Consume *text* and return the parameters accumulated so far."""
        for char in text:
            self._step(char)
        return self.params

    def _step(self, char: str) -> None:
        if self._start_new:
            self._start_new = False
            self.current = Param()
            self.params.append(self.current)

        param = self.current
        assert param is not None

        if self.state is ParseState.NAME:
            self._step_name(param, char)
        elif self.state is ParseState.TYPE:
            self._step_type(param, char)
        else:
            self._step_default(param, char)

    def _next_param(self) -> None:
        self._start_new = True
        self.state = ParseState.NAME

    def _step_name(self, param: Param, char: str) -> None:
        if char == ":":
            # An explicit type follows.
            param.type = ""
            self.state = ParseState.TYPE
        elif char == "=":
            self.state = ParseState.DEFAULT
        elif char == ",":
            self._next_param()
        else:
            sigil_type = type_for_sigil(char)
            if sigil_type is not None:
                # Characters after the sigil are appended to this type.
                param.type = sigil_type
                self.state = ParseState.TYPE
            elif char != " ":
                param.name += char

    def _step_type(self, param: Param, char: str) -> None:
        if char == ",":
            self._next_param()
        elif char == "=":
            self.state = ParseState.DEFAULT
        elif char != " ":
            param.type += char

    def _step_default(self, param: Param, char: str) -> None:
        if self.in_string:
            param.default += char
        elif char == ",":
            self._next_param()
        elif char != " ":
            param.default += char

        if char == '"':
            self.in_string = not self.in_string

def parse_params(raw: str | None) -> list[Param]:
    """Parse the raw text between a command's parentheses.

    Empty or whitespace-only input yields an empty list.
    """
    if not raw:
        return []
    text = raw.strip()
    if not text:
        return []
    return ParamParser().feed(text)

def render_params(params: list[Param]) -> str:
    """Render *params* as ``name:type = default, ...``."""
    return ", ".join(param.pretty() for param in params)
