"""String Casing — upper-case by default, lower-case on request.

Invariants:
    - Only an explicit to_upper=False lower-cases; every other value upper-cases
"""


def format_string(text: str, to_upper: bool = True) -> str:
    if to_upper is False:
        return text.lower()
    return text.upper()
