"""Error reporting: message sanitising, warning output and raising of library errors."""

from __future__ import annotations

import enum
import sys
from typing import IO, Union

_USE_STDOUT = object()

MessagePart = Union[str, bytes]


def sanitize_message(msg: MessagePart) -> str:
    """Return ``msg`` with every non-ASCII character replaced by ``'?'``.

    Byte strings are read as UTF-8; each undecodable byte becomes one ``'?'``.
    """
    if isinstance(msg, (bytes, bytearray)):
        msg = bytes(msg).decode("utf-8", errors="replace")
    return "".join(ch if ord(ch) < 0x80 else "?" for ch in msg)


class KE2Error(Exception):
    """Base of every error the library raises; catch it to catch them all."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message or "Empty message"


class ManagerErrorKind(enum.Enum):
    """Reasons the library set-up can fail."""

    FAILED_TO_INITIALIZE_GLFW = enum.auto()
    KE2_IN_DEBUG_BUT_USER_IN_EFFICIENCY = enum.auto()
    KE2_IN_EFFICIENCY_BUT_USER_IN_DEBUG = enum.auto()
    KE2_IN_X64_BUT_USER_IN_X86 = enum.auto()
    KE2_IN_X86_BUT_USER_IN_X64 = enum.auto()
    KE2_ON_WINDOWS_BUT_USER_ON_LINUX = enum.auto()
    KE2_ON_LINUX_BUT_USER_ON_WINDOWS = enum.auto()


class ManagerError(KE2Error):
    """Error raised while setting the library up."""

    def __init__(self, kind: ManagerErrorKind, message: str = "") -> None:
        super().__init__(message)
        self.kind = kind


class Reporter:
    """Writes warnings and errors to a stream and raises errors.

    ``stream`` defaults to the current ``sys.stdout``; ``None`` silences output.
    """

    def __init__(self, stream: IO[str] | None | object = _USE_STDOUT,
                 ignore_warnings: bool = False) -> None:
        self.stream = stream
        self.ignore_warnings = ignore_warnings
        self.last_warning_message = ""
        self.last_error_message = ""

    def _output(self) -> IO[str] | None:
        if self.stream is _USE_STDOUT:
            return sys.stdout
        return self.stream  # type: ignore[return-value]

    def _write(self, text: str) -> None:
        out = self._output()
        if out is not None:
            out.write(text + "\n")
            out.flush()

    @staticmethod
    def _build(args: tuple[MessagePart, ...]) -> str:
        return "".join(
            sanitize_message(a if isinstance(a, (str, bytes, bytearray)) else str(a))
            for a in args
        )

    def warn(self, *args: MessagePart) -> None:
        """Report a warning made of ``args`` unless warnings are ignored."""
        if self.ignore_warnings:
            return
        msg = self._build(args)
        self.last_warning_message = msg
        self._write("KE2 Warning: {" + (msg or "Empty warning") + "}")

    def fail(self, error: KE2Error | type[KE2Error], *args: MessagePart) -> None:
        """Report an error made of ``args`` and raise ``error`` carrying that message."""
        msg = self._build(args)
        if isinstance(error, type):
            if not issubclass(error, KE2Error):
                raise TypeError("error must derive from KE2Error")
            error = error()
        elif not isinstance(error, KE2Error):
            raise TypeError("error must derive from KE2Error")
        self.last_error_message = msg
        self._write("KE2 Error: {" + (msg or "Empty error") + "}")
        error.message = msg
        error.args = (msg,)
        raise error


default_reporter = Reporter()


def warn(*args: MessagePart) -> None:
    """Report a warning through the default reporter."""
    default_reporter.warn(*args)


def fail(error: KE2Error | type[KE2Error], *args: MessagePart) -> None:
    """Report an error through the default reporter and raise it."""
    default_reporter.fail(error, *args)