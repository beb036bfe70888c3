# src/parser_utils/core/__init__.py

"""
Core configuration for parser-utils.
"""

from .config import NormalizerConfig, load_config

__all__ = [
    "NormalizerConfig",
    "load_config",
]
