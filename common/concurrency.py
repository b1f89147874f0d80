import contextvars
import functools
from collections.abc import Callable
from typing import ParamSpec, TypeVar

from log_request_id import local as request_id_local


P = ParamSpec("P")
R = TypeVar("R")


def bind_request_context(func: Callable[P, R]) -> Callable[P, R]:
    """
    Wrap `func` so it runs in another thread with the caller's logging context: the django-guid
    correlation id (a context variable) and the django-log-request-id request id (a thread local).

    Call it once per submission. A copied context can only be entered by one thread at a time.
    """
    context = contextvars.copy_context()
    request_id = getattr(request_id_local, "request_id", None)

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        previous_request_id = getattr(request_id_local, "request_id", None)
        if request_id is not None:
            request_id_local.request_id = request_id
        try:
            return context.run(func, *args, **kwargs)
        finally:
            if previous_request_id is None:
                if hasattr(request_id_local, "request_id"):
                    del request_id_local.request_id
            else:
                request_id_local.request_id = previous_request_id

    return wrapper
