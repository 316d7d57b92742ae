from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional


def _check_char(name: str, value: Optional[str]) -> None:
    if value is None:
        return
    if not isinstance(value, str) or len(value) != 1:
        raise ValueError(f'{name} must be a single character string or None')


@dataclass(frozen=True)
class IdentifierPolicy:
    """Character policy applied while building an identifier.

    Attributes:
        prefix: Inserted before an identifier whose first character cannot
            start an identifier, and before a reserved word when no
            ``suffix`` is configured. ``None`` disables insertion.
        substitute: Default replacement for an illegal character that has no
            entry in ``substitutes``. ``None`` drops the character.
        substitutes: Per-character replacement strings. Overrides
            ``substitute``.
        suffix: Appended to a reserved word instead of prepending ``prefix``.
    """
    prefix: Optional[str] = '_'
    substitute: Optional[str] = None
    substitutes: Optional[Mapping[str, str]] = None
    suffix: Optional[str] = None

    def __post_init__(self) -> None:
        _check_char('prefix', self.prefix)
        _check_char('substitute', self.substitute)
        _check_char('suffix', self.suffix)

    def replacement_for(self, ch: str) -> Optional[str]:
        """Return what an illegal *ch* turns into, or None to drop it."""
        if self.substitutes is not None:
            replacement = self.substitutes.get(ch)
            if replacement is not None:
                return replacement
        return self.substitute


IDENTIFIER_POLICY = IdentifierPolicy(prefix='_')
CAMEL_CASE_POLICY = IdentifierPolicy(prefix='x')
INSTANCE_CASE_POLICY = IdentifierPolicy(prefix='_')
CLASS_CASE_POLICY = IdentifierPolicy(prefix='X')
PACKAGE_CASE_POLICY = IdentifierPolicy(prefix='_', substitute='_', suffix='_')
