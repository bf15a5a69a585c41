# fsmview/runtime/console.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import sys
from typing import Optional, TextIO


class ConsoleReader:
    """Reads lines from standard input with ``input()``."""

    def read_line(self, prompt: str = "") -> Optional[str]:
        try:
            return input(prompt)
        except EOFError:
            return None


class ConsoleWriter:
    """Writes lines to standard output."""

    def write_line(self, text: str = "") -> None:
        print(text)


class StreamReader:
    """
    Reads lines from a text stream, e.g. an ``io.StringIO`` holding scripted
    input. Prompts are echoed to ``echo`` when one is given.
    """

    def __init__(self, stream: TextIO, echo: Optional[TextIO] = None) -> None:
        self._stream = stream
        self._echo = echo

    def read_line(self, prompt: str = "") -> Optional[str]:
        if self._echo is not None and prompt:
            self._echo.write(prompt)
        line = self._stream.readline()
        if not line:
            return None
        return line.rstrip("\r\n")


class StreamWriter:
    """Writes lines to a text stream, defaulting to ``sys.stdout``."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream

    def write_line(self, text: str = "") -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(text + "\n")
