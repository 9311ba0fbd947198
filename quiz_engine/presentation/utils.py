import functools
import logging


logger = logging.getLogger('runtime')


def log_errors(func):
    """
    A decorator that wraps asynchronous functions to log exceptions.

    The error is logged with its traceback and raised again, the host decides whether
    it can go on.

    :param func: The asynchronous function to be wrapped.
    :return: The wrapped function with error logging.
    """
    @functools.wraps(func)
    async def wrapper(*args, **kwargs):
        try:
            return await func(*args, **kwargs)
        except Exception as e:
            logger.error(f"Error in {func.__name__}: {e}", exc_info=True)
            raise
    return wrapper
