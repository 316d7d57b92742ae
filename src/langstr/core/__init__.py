from __future__ import annotations

"""Public surface for langstr.core: protocol types and the identifier policy."""

from langstr.core.interfaces import IdentifierTransformerProtocol, InterpolatorProtocol
from langstr.core.models import (
    CAMEL_CASE_POLICY,
    CLASS_CASE_POLICY,
    IDENTIFIER_POLICY,
    INSTANCE_CASE_POLICY,
    PACKAGE_CASE_POLICY,
    IdentifierPolicy,
)

__all__ = [
    # Protocols
    "IdentifierTransformerProtocol",
    "InterpolatorProtocol",
    # Models
    "IdentifierPolicy",
    "IDENTIFIER_POLICY",
    "CAMEL_CASE_POLICY",
    "INSTANCE_CASE_POLICY",
    "CLASS_CASE_POLICY",
    "PACKAGE_CASE_POLICY",
]
