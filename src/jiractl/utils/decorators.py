import logging
from collections.abc import Callable
from functools import wraps
from typing import Any

import click

from ..exceptions import JiractlError

logger = logging.getLogger(__name__)


def handle_jiractl_errors(func: Callable) -> Callable:
    """
    Decorator turning jiractl errors raised by a command into click errors.

    click prints the message to stderr and exits with status 1.
    Configuration errors already carry a remediation hint.

    Args:
        func: The click command callback to wrap.

    Returns:
        The wrapped callback.
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except JiractlError as e:
            logger.debug(f"{type(e).__name__} in {func.__name__}: {e}")
            raise click.ClickException(str(e)) from e

    return wrapper
