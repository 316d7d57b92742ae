"""Public API surface for langstr.processing."""
__all__ = [
    "identifiers",
    "string_interpolator",
    "text_ops",
]
