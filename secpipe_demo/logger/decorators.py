import functools
import time
from typing import Any, Callable, TypeVar, cast
from secpipe_demo.logger import session_logger

F = TypeVar("F", bound=Callable[..., Any])

_MAX_ARG_LEN = 1000


def _truncate(value: Any) -> str:
    s_value = str(value)
    if len(s_value) > _MAX_ARG_LEN:
        return s_value[:_MAX_ARG_LEN] + "...(truncated)"
    return s_value


def log_execution_time(func: F) -> F:
    """Decorator to log execution time and arguments of a function.

    Logs:
    - Start of execution with arguments (truncated if too large)
    - End of execution with duration
    - Exceptions if they occur
    """
    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        func_name = func.__name__

        safe_args = [_truncate(arg) for arg in args]
        safe_kwargs = {k: _truncate(v) for k, v in kwargs.items()}

        session_logger.debug(f"Starting {func_name}", call_args=safe_args, call_kwargs=safe_kwargs)

        start_time = time.perf_counter()
        try:
            result = func(*args, **kwargs)
        except Exception as e:
            duration = time.perf_counter() - start_time
            session_logger.warning(
                f"Failed {func_name}",
                duration_seconds=round(duration, 4),
                error=str(e),
                error_type=type(e).__name__,
                success=False
            )
            raise

        duration = time.perf_counter() - start_time
        session_logger.debug(
            f"Completed {func_name}",
            duration_seconds=round(duration, 4),
            success=True
        )
        return result

    return cast(F, wrapper)
