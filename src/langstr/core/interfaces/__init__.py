from .text import IdentifierTransformerProtocol, InterpolatorProtocol

__all__ = [
    'IdentifierTransformerProtocol',
    'InterpolatorProtocol',
]
