# src/parser_utils/normalize/__init__.py

"""
Normalization layer for parser-utils.
Converts strings and partial records into canonical file records.
"""

from .schema import (
    CANONICAL_FIELDS,
    DATA_PROPS,
    FileRecord,
    PartialRecord,
    RawString,
    file_defaults,
)
from .merge_utils import deep_merge, flatten_object
from .transformer import (
    FileNormalizer,
    coerce_input,
    extend_file,
    merge_data,
    sift_keys,
)

__all__ = [
    "CANONICAL_FIELDS",
    "DATA_PROPS",
    "FileRecord",
    "PartialRecord",
    "RawString",
    "file_defaults",
    "deep_merge",
    "flatten_object",
    "FileNormalizer",
    "coerce_input",
    "extend_file",
    "merge_data",
    "sift_keys",
]
