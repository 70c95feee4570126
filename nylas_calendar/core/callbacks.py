"""
Callback support for coroutine operations.

Every public operation is a coroutine. Decorating it with `supports_callback`
adds an optional keyword-only `callback` which receives `(error, result)`,
while the awaiting caller still gets the result or the exception.
"""

import functools
import inspect
from typing import Any, Awaitable, Callable

Callback = Callable[..., Any]


async def _notify(callback: Callback, *args) -> None:
    outcome = callback(*args)
    if inspect.isawaitable(outcome):
        await outcome


def supports_callback(func: Callable[..., Awaitable[Any]]):
    @functools.wraps(func)
    async def wrapper(*args, callback: Callback | None = None, **kwargs):
        try:
            result = await func(*args, **kwargs)
        except Exception as exc:
            if callback is not None:
                await _notify(callback, exc)
            raise
        if callback is not None:
            await _notify(callback, None, result)
        return result

    return wrapper
