import re
from typing import Any

from mockstore.errors import ValidationError

_INT_RE = re.compile(r"^\s*\+?\d+\s*$")

def coerce_positive_int(value: Any, field: str) -> int:
    """
    Entier strictement positif.
    - Accepte int et chaînes numériques ("3"), ainsi que les flottants entiers (2.0)
    - Refuse bool, None, décimales, chaînes non numériques
    """
    if isinstance(value, bool) or value is None:
        raise ValidationError(f"{field} must be a positive integer")
    if isinstance(value, int):
        result = value
    elif isinstance(value, float) and value.is_integer():
        result = int(value)
    elif isinstance(value, str) and _INT_RE.match(value):
        result = int(value)
    else:
        raise ValidationError(f"{field} must be a positive integer")
    if result <= 0:
        raise ValidationError(f"{field} must be a positive integer")
    return result
