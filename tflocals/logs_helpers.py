import functools
import logging


def log_call(*, show_args=False, show_result=False):
    """
    Decorator tracing a pipeline stage at DEBUG level.

    Failures are traced too but left to the caller to report, the CLI logs
    the wrapped error once.

    Args:
        show_args: Log function arguments (default: False)
        show_result: Log return value (default: False)
    """

    def decorator(func):
        logger = logging.getLogger(func.__module__)

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            if not logger.isEnabledFor(logging.DEBUG):
                return func(*args, **kwargs)

            if show_args:
                args_repr = [repr(a) for a in args]
                kwargs_repr = [f"{k}={v!r}" for k, v in kwargs.items()]
                logger.debug("-> %s(%s)", func.__name__, ", ".join(args_repr + kwargs_repr))
            else:
                logger.debug("-> %s", func.__name__)

            try:
                result = func(*args, **kwargs)
            except Exception as e:
                logger.debug("✗ %s raised %s: %s", func.__name__, type(e).__name__, e)
                raise

            if show_result:
                logger.debug("<- %s => %r", func.__name__, result)
            else:
                logger.debug("<- %s", func.__name__)
            return result

        return wrapper

    return decorator
