"""Delays between generations."""
import time
from typing import Protocol


class Timer(Protocol):

    def wait(self, seconds: float) -> None:
        ...


class Sleeper:
    """Blocks the calling thread."""

    def wait(self, seconds: float) -> None:
        time.sleep(seconds)


class NoWait:
    """Returns immediately, for tests and headless runs."""

    def wait(self, seconds: float) -> None:
        pass
