"""Display formatting for argument values and failure text."""

from typing import Any, get_origin

from rich.pretty import pretty_repr


def format_argument(value: Any, highlight: bool = False) -> str:
    """Format a value the way it is shown in call diagnostics.

    Strings are wrapped in double quotes but otherwise left as-is, so
    multi-line text stays readable. Everything else goes through
    ``rich.pretty.pretty_repr``.

    Parameters
    ----------
    value : Any
        The value to display.
    highlight : bool, optional
        If True, surround the result with ``*`` to mark it as non-matching.
        Default is False.

    Returns
    -------
    str
        The display string.
    """
    if isinstance(value, str):
        text = f'"{value}"'
    else:
        text = pretty_repr(value, max_width=120)
    return f"*{text}*" if highlight else text


def type_name(tp: Any) -> str:
    """Display name of a type annotation.

    Plain classes show their ``__name__``; unions, parameterized generics and
    special forms such as ``typing.Any`` show their ``repr``.
    """
    if get_origin(tp) is None and isinstance(tp, type):
        return tp.__name__
    return repr(tp)
