"""
Value formatters for exception messages.

Short, robust renderings of arbitrary operands, used when a magnitude, unit
or language argument is rejected.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Any, Literal

Style = Literal["ascii", "equal"]

PRIMITIVE_TYPES = (
    type(None),
    bool,
    int,
    float,
    str,
)


# Methods --------------------------------------------------------------------------------------------------------------

def fmt_type(obj: Any, *, style: Style = "ascii") -> str:
    """Format the type of an object or a type object.

    Examples:
        >>> fmt_type(42)
        '<int>'
        >>> fmt_type(list)
        '<list>'
    """
    cls = obj if isinstance(obj, type) else type(obj)
    return _fmt_type_value(cls.__name__, style=style)


def fmt_value(obj: Any, *, style: Style = "ascii", max_repr: int = 80) -> str:
    """
    Format a single value as a type-value pair for exception messages.

    Primitives are shown bare, everything else is labelled with its type.
    Long reprs are truncated and broken __repr__ methods do not raise.

    Examples:
        >>> fmt_value(42)
        '42'
        >>> fmt_value("1.5 kB")
        "'1.5 kB'"
        >>> fmt_value([1, 2])
        '<list: [1, 2]>'
    """
    repr_ = _fmt_truncate(_safe_repr(obj), max_repr)
    if type(obj) in PRIMITIVE_TYPES:
        return repr_
    return _fmt_type_value(type(obj).__name__, repr_, style=style)


# Private Methods ------------------------------------------------------------------------------------------------------

def _fmt_truncate(repr_: str, max_len: int, ellipsis: str = "...") -> str:
    """Truncate to max_len characters, keeping string quotes balanced."""
    if len(repr_) <= max_len:
        return repr_

    if len(repr_) >= 2 and repr_[0] in ("'", '"') and repr_[-1] == repr_[0]:
        quote = repr_[0]
        return f"{quote}{repr_[1:1 + max(1, max_len)]}{ellipsis}{quote}"

    return repr_[:max(1, max_len)] + ellipsis


def _fmt_type_value(type_name: str, value_repr: str | None = None, *, style: Style = "ascii") -> str:
    if style == "equal":
        return type_name if value_repr is None else f"{type_name}={value_repr}"
    return f"<{type_name}>" if value_repr is None else f"<{type_name}: {value_repr}>"


def _safe_repr(obj) -> str:
    try:
        return repr(obj)
    except Exception as e:
        return f"<{type(obj).__name__} object (repr failed: {type(e).__name__})>"
