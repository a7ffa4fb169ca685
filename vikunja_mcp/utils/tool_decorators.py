"""Decorators for standardizing Vikunja call error handling."""

import functools
import logging
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

import httpx

from .errors import DecodeError, NetworkError, RemoteError
from .result import Err, ErrorKind, Ok, Result

logger = logging.getLogger(__name__)

T = TypeVar("T")


def returns_result(
    func: Callable[..., Awaitable[T]],
) -> Callable[..., Awaitable[Result[T]]]:
    """Collapse the outcome of an async Vikunja call into a Result.

    The return value is wrapped in ``Ok``. Network, HTTP status and decode
    failures become an ``Err`` tagged with their kind; the detail is logged
    but callers only need to branch on ``result.ok``.

    Example:
        @returns_result
        async def fetch() -> list[dict]:
            ...

        result = await fetch()
        if not result.ok:
            ...
    """

    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Result[T]:
        call_name = func.__name__
        try:
            return Ok(await func(*args, **kwargs))
        except RemoteError as e:
            logger.error(f"{call_name} failed: {e}")
            return Err(ErrorKind.REMOTE, str(e))
        except (NetworkError, httpx.RequestError) as e:
            logger.error(f"{call_name} request failed: {e}")
            return Err(ErrorKind.NETWORK, str(e))
        except (DecodeError, ValueError) as e:
            logger.error(f"{call_name} returned an unexpected body: {e}")
            return Err(ErrorKind.DECODE, str(e))
        except Exception as e:
            logger.exception(f"{call_name} unexpected error: {e}")
            return Err(ErrorKind.UNEXPECTED, f"{type(e).__name__}: {e}")

    return wrapper
