from __future__ import annotations
"""Protocols for the identifier transformer and the string interpolator."""

from typing import Mapping, MutableMapping, Optional, Protocol, runtime_checkable

from langstr.core.models import IdentifierPolicy


@runtime_checkable
class IdentifierTransformerProtocol(Protocol):
    """Protocol for identifier validation and case conversion.

    Every transform returns None and "" unchanged.
    """

    def is_valid(self, text: str, qualified: bool = True) -> bool:
        ...

    def to_identifier(self, text: Optional[str], policy: Optional[IdentifierPolicy] = None) -> Optional[str]:
        ...

    def to_package_case(self, text: Optional[str], policy: Optional[IdentifierPolicy] = None) -> Optional[str]:
        ...

    def to_camel_case(self, text: Optional[str], policy: Optional[IdentifierPolicy] = None) -> Optional[str]:
        ...

    def to_instance_case(self, text: Optional[str], policy: Optional[IdentifierPolicy] = None) -> Optional[str]:
        ...

    def to_class_case(self, text: Optional[str], policy: Optional[IdentifierPolicy] = None) -> Optional[str]:
        ...


@runtime_checkable
class InterpolatorProtocol(Protocol):
    """Protocol for delimiter-based placeholder interpolation."""

    def interpolate(
        self,
        text: str,
        mapping: Mapping[str, str],
        open_token: str = ...,
        close_token: str = ...,
    ) -> str:
        ...

    def interpolate_all(
        self,
        mapping: MutableMapping[str, str],
        open_token: str = ...,
        close_token: str = ...,
    ) -> MutableMapping[str, str]:
        ...
