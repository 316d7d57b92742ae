from __future__ import annotations

from langstr.constants import DISCARD_TOKENS, RESERVED_WORDS
from langstr.core.models import IdentifierPolicy
from langstr.errors import (
    CycleDetectedError,
    IllegalAnnotationError,
    InterpolationError,
    UnresolvedKeyError,
)
from langstr.logging.helpers import get_logger, setup_base_logger
from langstr.processing.identifiers import (
    IdentifierTransformer,
    is_valid,
    to_camel_case,
    to_class_case,
    to_identifier,
    to_instance_case,
    to_package_case,
)
from langstr.processing.string_interpolator import StringInterpolator, interpolate, interpolate_all
from langstr.processing.text_ops import (
    get_alpha,
    get_common_prefix,
    get_random_alpha_numeric_string,
    get_random_alpha_string,
    index_of_unquoted,
    last_index_of_unquoted,
    repeat,
    to_lower_case,
    to_truncated_string,
    to_upper_case,
    trim,
)

__version__ = '1.0.0'

__all__ = [
    'DISCARD_TOKENS',
    'RESERVED_WORDS',
    'IdentifierPolicy',
    'IdentifierTransformer',
    'StringInterpolator',
    'InterpolationError',
    'UnresolvedKeyError',
    'CycleDetectedError',
    'IllegalAnnotationError',
    'get_logger',
    'setup_base_logger',
    'is_valid',
    'to_identifier',
    'to_package_case',
    'to_camel_case',
    'to_instance_case',
    'to_class_case',
    'interpolate',
    'interpolate_all',
    'get_alpha',
    'get_common_prefix',
    'get_random_alpha_string',
    'get_random_alpha_numeric_string',
    'index_of_unquoted',
    'last_index_of_unquoted',
    'repeat',
    'to_lower_case',
    'to_upper_case',
    'to_truncated_string',
    'trim',
]
