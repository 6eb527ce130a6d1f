# chatserver/app/util/validators.py
"""
Argument checks used by the controller.

Each check returns None when the value is acceptable and raises
ValidationError naming the argument otherwise.
"""
import re
from typing import Any

from chatserver.app.errors import ValidationError

_ALNUM = re.compile(r"[A-Za-z0-9]+")


def is_non_zero_length_string(value: Any, name: str) -> None:
    if not isinstance(value, str):
        raise ValidationError(f"{name} must be a string, got {type(value).__name__}", field=name)
    if len(value) == 0:
        raise ValidationError(f"{name} must not be empty", field=name)


def is_alnum_string(value: Any, name: str) -> None:
    """Only ASCII letters and digits are accepted."""
    if not isinstance(value, str) or not _ALNUM.fullmatch(value):
        raise ValidationError(f"{name} must contain only letters and digits", field=name)


def is_positive_integer(value: Any, name: str) -> None:
    # bool is a subclass of int
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{name} must be an integer, got {type(value).__name__}", field=name)
    if value <= 0:
        raise ValidationError(f"{name} must be positive, got {value}", field=name)


def is_instance_of(value: Any, cls: type, name: str, class_name: str) -> None:
    if not isinstance(value, cls):
        raise ValidationError(f"{name} must be a {class_name}, got {type(value).__name__}", field=name)
