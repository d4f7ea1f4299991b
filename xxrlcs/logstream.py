"""Line-oriented log output to a file, standard output, or nowhere."""

from __future__ import annotations

import sys
from typing import TextIO

from .smoothing import SimpleMovingAverage


def _format_value(value) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, float):
        return format(value, "g")
    return str(value)


class LogStream:
    """Writes values to a file; with no filename, to stdout or to nowhere."""

    def __init__(self, filename: str = "", use_stdout_when_empty: bool = True):
        self._owns_stream = False
        self._stream: TextIO | None
        if filename:
            self._stream = open(filename, "w", encoding="utf-8")
            self._owns_stream = True
        elif use_stdout_when_empty:
            self._stream = sys.stdout
        else:
            self._stream = None

    @property
    def enabled(self) -> bool:
        """Whether written values go anywhere."""
        return self._stream is not None

    def _emit(self, text: str) -> None:
        if self._stream is not None:
            self._stream.write(text)
            self._stream.flush()

    def write(self, value) -> None:
        """Write a value with no line ending."""
        self._emit(_format_value(value))

    def write_line(self, value) -> None:
        """Write a value followed by a newline."""
        self._emit(_format_value(value) + "\n")

    def close(self) -> None:
        if self._owns_stream and self._stream is not None:
            self._stream.close()
        self._stream = None
        self._owns_stream = False

    def __enter__(self) -> "LogStream":
        return self

    def __exit__(self, *args) -> None:
        self.close()


class SmaLogStream(LogStream):
    """A log stream that writes numbers smoothed by a simple moving average.

    Nothing is written until the averaging window has been filled once.
    """

    def __init__(self, filename: str = "", sma_width: int = 1, use_stdout_when_empty: bool = True):
        self._sma = SimpleMovingAverage(sma_width)
        self._count = 0
        super().__init__(filename, use_stdout_when_empty)

    def _smoothed(self, value) -> float | None:
        if isinstance(value, str):
            raise TypeError("a smoothed log stream only accepts numbers")
        if not self.enabled:
            return None
        average = self._sma(value)
        self._count += 1
        if self._count >= self._sma.order():
            return average
        return None

    def write(self, value) -> None:
        average = self._smoothed(value)
        if average is not None:
            super().write(float(average))

    def write_line(self, value) -> None:
        average = self._smoothed(value)
        if average is not None:
            super().write_line(float(average))