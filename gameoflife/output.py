"""Output sinks the game driver prints generations to."""
import sys
from typing import List, Optional, Protocol, TextIO

CLEAR_SCREEN = "\x1b[2J\x1b[1;1H"


class Printer(Protocol):
    """Where rendered generations go."""

    def clear(self) -> None:
        ...

    def print(self, output: str) -> None:
        ...


class Console:
    """Prints to a terminal stream, clearing it with ANSI escape codes."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream

    def clear(self) -> None:
        self.print(CLEAR_SCREEN)

    def print(self, output: str) -> None:
        stream = self.stream if self.stream is not None else sys.stdout
        stream.write(output)
        stream.flush()


class MemoryPrinter:
    """Keeps everything printed in memory, clear commands included."""

    def __init__(self):
        self._output: List[str] = []

    def clear(self) -> None:
        self.print(CLEAR_SCREEN)

    def print(self, output: str) -> None:
        self._output.append(output)

    def log(self) -> str:
        return ''.join(self._output)
