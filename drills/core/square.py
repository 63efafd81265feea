"""Square Decision — pure accept/reject rule for the delayed square computation.

Invariants:
    - square_or_reject is PURE: no sleep, no logging, no IO
    - n < 0 (including -inf) raises InvalidInputError("Negative number not allowed")
    - NaN and non-real inputs (bool included) raise InvalidInputError with their own message
    - n >= 0 returns n * n; +inf returns inf

Design Decisions:
    - Decision separated from the delay: services/delayed_square awaits, then calls this
    - NaN rejected rather than propagated: NaN < 0 is False, so it would otherwise
      silently "succeed" with NaN
"""

from numbers import Real

from drills.core.domain_types import Number
from drills.core.errors import ErrorContext, InvalidInputError


NAN_MESSAGE = "NaN is not allowed"
NOT_A_NUMBER_MESSAGE = "Input must be a real number"


def square_or_reject(n: Number) -> Number:
    """Return n * n, or raise InvalidInputError for inputs outside the contract."""
    ctx = ErrorContext(exercise="square", input_repr=repr(n))
    if isinstance(n, bool) or not isinstance(n, Real):
        raise InvalidInputError(NOT_A_NUMBER_MESSAGE, ctx)
    # NaN is the only value unequal to itself
    if n != n:
        raise InvalidInputError(NAN_MESSAGE, ctx)
    if n < 0:
        raise InvalidInputError(context=ctx)
    return n * n
