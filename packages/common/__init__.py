"""Common utilities for the docs parser.

This package provides configuration and logging setup shared by the
markdown extraction modules.
"""

from packages.common.config import DocsParserConfig, get_config
from packages.common.logging import get_logger, setup_logging

__all__ = [
    "DocsParserConfig",
    "get_config",
    "get_logger",
    "setup_logging",
]
