"""langstr.logging – logger naming, configuration and tracing helpers."""
from .helpers import JsonLogFormatter, get_logger, is_trace_enabled, setup_base_logger, trace

__all__ = ['JsonLogFormatter', 'get_logger', 'is_trace_enabled', 'setup_base_logger', 'trace']
