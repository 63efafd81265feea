"""Value Discriminator — strings measure their length, numbers double.

Invariants:
    - str -> len(value); real number -> value * 2
    - Anything else raises InvalidInputError (no silent coercion)
"""

from numbers import Real

from drills.core.domain_types import Number
from drills.core.errors import ErrorContext, InvalidInputError


def process_value(value: str | Number) -> Number:
    if isinstance(value, str):
        return len(value)
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidInputError(
            "Value must be a string or a number",
            ErrorContext(exercise="process_value", input_repr=repr(value)),
        )
    return value * 2
