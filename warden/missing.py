"""
MISSING sentinel for absent values.
"""

from enum import Enum


class _Missing(Enum):
    """
    Marker for a value that is not there at all.

    Distinct from ``None``: a key absent from a mapping, or a position past the
    end of a tuple, is validated as ``MISSING``. ``Optional`` accepts it,
    ``Nullable`` does not.

    Examples:
        Object({"id": Number()})({})        # the "id" schema sees MISSING
        Tuple(Number(), String())([1])      # position 1 sees MISSING
        Optional(String())(MISSING)         # Ok(MISSING)
    """

    MISSING = 0

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING = _Missing.MISSING
