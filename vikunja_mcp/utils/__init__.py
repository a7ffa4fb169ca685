"""Utility functions and classes."""

from .errors import DecodeError, NetworkError, ReminderBridgeError, RemoteError
from .result import Err, ErrorKind, Ok, Result
from .tool_decorators import returns_result

__all__ = [
    "ReminderBridgeError",
    "NetworkError",
    "RemoteError",
    "DecodeError",
    "Ok",
    "Err",
    "ErrorKind",
    "Result",
    "returns_result",
]
