# productos_api/validation.py

"""
Declarative validation rules for request parameters and bodies.

A rule chain targets one field in one location and holds an ordered list of
checks. Every check runs, and each failing check contributes its own error
entry, so a single field can report several problems at once::

    body("price").is_numeric().with_message("Valor no valido").not_empty()

Values are checked in their string form, the way form-style validators
see them: a missing value is "" and booleans are "true"/"false".
"""
import math
import re
from decimal import Decimal
from typing import Any, Callable, Dict, Iterable, List, Mapping

DEFAULT_MESSAGE = "Invalid value"

PARAMS = "params"
BODY = "body"

_INT_RE = re.compile(r"[-+]?(?:0|[1-9][0-9]*)")
_NUMERIC_RE = re.compile(r"[+-]?(?:[0-9]*\.)?[0-9]+")
_BOOLEAN_STRINGS = ("true", "false", "1", "0")

_MISSING = object()


def to_string(value: Any) -> str:
    if value is None or value is _MISSING:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and math.isfinite(value):
        # Plain decimal notation; str() would give "1e-05" or "1e+16"
        return format(Decimal(repr(value)), "f")
    return str(value)


class ValidationChain:
    """Ordered checks for a single field."""

    def __init__(self, field: str, location: str):
        self.field = field
        self.location = location
        self._checks: List[list] = []

    def _add(self, predicate: Callable[[Any], bool]) -> "ValidationChain":
        self._checks.append([predicate, DEFAULT_MESSAGE])
        return self

    def with_message(self, message: str) -> "ValidationChain":
        """Set the message reported by the most recently added check."""
        if not self._checks:
            raise ValueError("with_message() needs a preceding check")
        self._checks[-1][1] = message
        return self

    def is_int(self) -> "ValidationChain":
        return self._add(lambda value: bool(_INT_RE.fullmatch(to_string(value))))

    def is_numeric(self) -> "ValidationChain":
        return self._add(lambda value: bool(_NUMERIC_RE.fullmatch(to_string(value))))

    def is_boolean(self) -> "ValidationChain":
        return self._add(lambda value: to_string(value) in _BOOLEAN_STRINGS)

    def not_empty(self) -> "ValidationChain":
        return self._add(lambda value: len(to_string(value)) > 0)

    def custom(self, predicate: Callable[[Any], bool]) -> "ValidationChain":
        """Add a check on the raw value (None when the field is absent)."""

        def check(value):
            try:
                return bool(predicate(None if value is _MISSING else value))
            except (TypeError, ValueError, ArithmeticError):
                return False

        return self._add(check)

    def run(self, source: Mapping[str, Any]) -> List[Dict[str, Any]]:
        value = source.get(self.field, _MISSING)
        errors = []
        for predicate, message in self._checks:
            if predicate(value):
                continue
            error = {"type": "field", "msg": message, "path": self.field, "location": self.location}
            if value is not _MISSING:
                error["value"] = value
            errors.append(error)
        return errors

    def __repr__(self):
        return f"<ValidationChain({self.location}.{self.field}, checks={len(self._checks)})>"


def param(field: str) -> ValidationChain:
    return ValidationChain(field, PARAMS)


def body(field: str) -> ValidationChain:
    return ValidationChain(field, BODY)


def run_validations(
    chains: Iterable[ValidationChain],
    params: Mapping[str, Any],
    payload: Mapping[str, Any],
) -> List[Dict[str, Any]]:
    """Run every chain and collect all errors in declaration order."""
    errors = []
    for chain in chains:
        source = params if chain.location == PARAMS else payload
        errors.extend(chain.run(source))
    return errors


def greater_than_zero(value: Any) -> bool:
    return float(value) > 0
