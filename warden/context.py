"""
Context manager for validation configuration (e.g., fail-fast mode).
"""

from contextlib import contextmanager
from contextvars import ContextVar

# Context variable for fail-fast mode
_fail_fast: ContextVar[bool] = ContextVar("fail_fast", default=False)


def is_fail_fast() -> bool:
    """Check if fail-fast mode is currently enabled."""
    return _fail_fast.get()


@contextmanager
def validation_context(*, fail_fast: bool = False):
    """
    Context manager for validation configuration.

    Args:
        fail_fast: If True, structural schemas (Object, Record, Array, Tuple,
                   Intersection) stop at the first failing child and report
                   only its errors. By default every child is validated and
                   all errors are reported. Union always tries every
                   alternative before failing.

    Example:
        from warden import Object, Number, String, validation_context

        user = Object({"id": Number(), "name": String()})

        # Default: both fields reported
        user({"id": "x", "name": 1})   # Err with 2 errors

        # Fail fast: only the first failing field
        with validation_context(fail_fast=True):
            user({"id": "x", "name": 1})   # Err with 1 error at ("id",)
    """
    token = _fail_fast.set(fail_fast)
    try:
        yield
    finally:
        _fail_fast.reset(token)
