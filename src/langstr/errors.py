"""
errors – Exception types raised by langstr.

Invalid arguments are reported with the built-in ValueError / IndexError;
the classes below cover failures that callers usually want to tell apart.
"""

from typing import Any, Optional, Sequence, Tuple


class InterpolationError(ValueError):
    """Base class for placeholder resolution failures."""


class UnresolvedKeyError(InterpolationError):
    """A placeholder names a key that has no value in the mapping."""

    def __init__(self, key: str) -> None:
        super().__init__(f'No value for placeholder key: {key!r}')
        self.key = key


class CycleDetectedError(InterpolationError):
    """Resolving a key re-entered a key that is still being resolved."""

    def __init__(self, key: str, chain: Sequence[str] = ()) -> None:
        super().__init__('Loop detected.')
        self.key = key
        self.chain: Tuple[str, ...] = tuple(chain)


class IllegalAnnotationError(Exception):
    """Raised to indicate that an illegal annotation was encountered."""

    def __init__(self, annotation: Any, message: Optional[str] = None) -> None:
        if message is None:
            super().__init__()
        else:
            super().__init__(message)
        self._annotation = annotation

    @property
    def annotation(self) -> Any:
        return self._annotation
