"""
Exceptions raised by warden.

Validation failures are returned as Err values; ParseError is only raised
by unsafe_parse for callers that prefer exceptions.
"""

from __future__ import annotations

from typing import Iterable

from .types import ValidationError


class ParseError(ValueError):
    """
    Raised when a value fails validation in unsafe_parse.

    The message has one line per error, prefixed with its dotted path:
        rocket.cores.2.status: Expecting type 'string'. Got type 'null'.
    """

    def __init__(self, errors: Iterable[ValidationError]):
        self.errors: tuple[ValidationError, ...] = tuple(errors)
        super().__init__("\n".join(str(err) for err in self.errors))
