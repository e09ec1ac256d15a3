# -*- coding: utf-8 -*-
"""Contains utility functions to assist in various :mod:`ecmodels` functions."""
import logging
from copy import copy
from numbers import Real
from operator import ge, gt

from depinfo import print_dependencies


LOG_COLORS = {
    logging.CRITICAL: "\x1b[90m",
    logging.ERROR: "\x1b[91m",
    logging.WARNING: "\x1b[93m",
    logging.INFO: "\x1b[94m",
    logging.DEBUG: "\x1b[92m",
    -1: "\x1b[0m",
}
"""dict: Contains logger levels and corresponding color codes."""


# Public
def show_versions():
    """Print dependency information."""
    print_dependencies("ecmodels")


def ensure_non_negative_value(value, exclude_zero=False):
    """Ensure provided value is a non-negative value, or ``None``.

    Parameters
    ----------
    value : float
        The value to ensure is non-negative
    exclude_zero : bool
        If ``True``, zero is rejected as well.

    Raises
    ------
    TypeError
        Occurs if the value is not a real number.
    ValueError
        Occurs if the value is negative or NaN.

    """
    if value is not None:
        if isinstance(value, bool) or not isinstance(value, Real):
            raise TypeError("Must be an int or float")
        if exclude_zero:
            comparision = gt
            msg = "Must be a positive number"
        else:
            comparision = ge
            msg = "Must be a non-negative number"

        # NaN fails every comparison
        if not comparision(value, 0.0):
            raise ValueError(msg)

    return value


def as_lookup(values, name="values"):
    """Return a function looking up values by identifier.

    Parameters
    ----------
    values : dict, callable, or None
        Either a ``dict`` mapping identifiers to values, or a callable
        taking an identifier. ``None`` gives a lookup that never finds
        anything.
    name : str
        Name of the argument, used in error messages.

    Returns
    -------
    callable
        A function returning the value for an identifier, or ``None`` if
        there is no value for it.

    """
    if values is None:
        return lambda key: None
    if callable(values):
        return values
    if hasattr(values, "get"):
        return values.get

    raise TypeError("'{0}' must be a dict or a callable.".format(name))


class ColorFormatter(logging.Formatter):
    """Colored Formatter for logging output.

    Based on
    http://uran198.github.io/en/python/2016/07/12/colorful-python-logging.html

    """

    def format(self, record, *args, **kwargs):
        """Set logger format."""
        # Copy old record
        new_record = copy(record)
        # Ensure level in log color dict
        if new_record.levelno in LOG_COLORS:
            # Get the color
            color, reset = LOG_COLORS[new_record.levelno], LOG_COLORS[-1]
            # Set the levelname color
            new_record.levelname = "{color}{level}:{reset}".format(
                color=color, level=new_record.levelname, reset=reset
            )

            # Set the message color
            new_record.msg = "{color}{msg}{reset}".format(
                color=color, msg=new_record.msg, reset=reset
            )

        return super(ColorFormatter, self).format(new_record, *args, **kwargs)


# Internal
def _make_logger(name):
    """Make the logger instance and set the default format."""
    # Create colored formatter
    formatter = ColorFormatter("%(levelname)s %(message)s")
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    # Get logger
    logger = logging.getLogger(name)
    # Add handler and return
    logger.addHandler(handler)
    return logger


__all__ = (
    "show_versions",
    "ensure_non_negative_value",
    "as_lookup",
    "LOG_COLORS",
    "ColorFormatter",
)
