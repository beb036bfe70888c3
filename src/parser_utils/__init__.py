# src/parser_utils/__init__.py

"""
parser-utils
Normalizes file-like inputs into canonical file records for parser chains.
"""

__version__ = "0.1.0"
__author__ = "parser-utils contributors"

# No direct exports from root; subpackages are accessed explicitly
# e.g., from parser_utils.normalize import extend_file
