"""Cross-cutting utilities (lowest dependency layer).

This package provides shared primitives for:
    - Atomic I/O and YAML handling (fs)
    - Unified logging (logging_config)

No module in utils/ may import from upper layers (core, configs, scripts).

Convenience imports:
    from rect_clip.utils import fs
    from rect_clip.utils.logging_config import setup_logging, get_logger
"""

from . import fs
from . import logging_config

from .logging_config import get_logger, push_context, setup_logging

__all__ = [
    # Modules
    'fs',
    'logging_config',
    # Direct exports
    'setup_logging',
    'get_logger',
    'push_context',
]
