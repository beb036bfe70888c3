# src/parser_utils/normalize/transformer.py

import logging
from collections.abc import Mapping
from typing import Any, Dict, Iterable, Optional

from parser_utils.core.config import NormalizerConfig
from parser_utils.normalize.merge_utils import (
    deep_merge,
    difference,
    flatten_object,
    pick,
)
from parser_utils.normalize.schema import (
    CANONICAL_FIELDS,
    FileInput,
    FileRecord,
    PartialRecord,
    RawString,
    file_defaults,
)

logger = logging.getLogger(__name__)


class FileNormalizer:
    """
    Normalizes file-like inputs into canonical FileRecord objects.

    Handles bare content strings, partial records (any mapping) and
    already normalized records, so the next parser in the chain can rely
    on `path`, `content`, `data` and `orig` being present and nothing else.
    """

    def __init__(self, config: Optional[NormalizerConfig] = None):
        self.config = config or NormalizerConfig()

    def extend(self, file: Any, options: Optional[Mapping] = None) -> FileRecord:
        """
        Extend and normalize a file, merging caller options into its data.

        Args:
            file: Content string, mapping or FileRecord
            options: Extra data; a `locals` sub-mapping is used in place of
                the whole mapping when present

        Returns:
            A new FileRecord. Falsy input yields a default record.
        """
        provisional = self.coerce(file)
        if provisional is None:
            return FileRecord()

        if options is None:
            opts: Dict[str, Any] = {}
        elif isinstance(options, Mapping):
            opts = dict(options)
        else:
            logger.warning(
                f"Ignoring options of type {type(options).__name__}, expected a mapping"
            )
            opts = {}

        obj = self._provisional_fields(provisional)

        local_data = opts["locals"] if "locals" in opts else opts
        if not isinstance(local_data, Mapping):
            local_data = None
        obj["data"] = self.merge_data(obj, local_data)
        return self.sift_keys(obj)

    def coerce(self, file: Any) -> Optional[FileInput]:
        """Resolve raw input to a RawString or PartialRecord; None when falsy."""
        if isinstance(file, (RawString, PartialRecord)):
            return file
        if isinstance(file, str):
            return RawString(content=file)
        if isinstance(file, FileRecord):
            return PartialRecord(fields=file.to_dict())
        if not file:
            return None
        if isinstance(file, Mapping):
            return PartialRecord(fields=file)

        logger.warning(
            f"Treating input of type {type(file).__name__} as a record with no properties"
        )
        return PartialRecord()

    def _provisional_fields(self, provisional: FileInput) -> Dict[str, Any]:
        if isinstance(provisional, RawString):
            fields = {"content": provisional.content}
        else:
            fields = dict(provisional.fields)

        # gray-matter compatibility
        if "original" in fields:
            logger.debug("Renaming legacy 'original' property to 'orig'")
            fields["orig"] = fields.pop("original")

        return fields

    def merge_data(
        self,
        obj: Mapping,
        local_data: Any = None,
        props: Optional[Iterable[str]] = None,
    ) -> Dict[str, Any]:
        """
        Merge the data sources of `obj` into a single mapping.

        Sources named in `props` (default: `config.data_props`) are merged
        in order, then `local_data` wins over all of them. A nested
        `flatten_key` mapping inside `local_data` is collapsed first, so it
        keeps the precedence of `local_data`. A list passed as `local_data`
        is used as `props`.
        """
        if not isinstance(obj, Mapping):
            logger.warning(
                f"Treating input of type {type(obj).__name__} as a record with no properties"
            )
            obj = {}

        if isinstance(local_data, (list, tuple)):
            props = local_data
            local_data = None

        if props is None:
            props = self.config.data_props

        if isinstance(local_data, Mapping):
            local_data = flatten_object(dict(local_data), self.config.flatten_key)

        sources = list(pick(obj, props).values())
        return deep_merge(*sources, local_data)

    def sift_keys(
        self, obj: Mapping, props: Optional[Iterable[str]] = None
    ) -> FileRecord:
        """
        Keep the canonical fields of `obj` and move every other property,
        plus any named in `props`, under `orig`.
        """
        if not isinstance(obj, Mapping):
            logger.warning(
                f"Treating input of type {type(obj).__name__} as a record with no properties"
            )
            obj = {}

        merged = deep_merge(file_defaults(), obj)
        overflow = difference(list(merged) + list(props or []), CANONICAL_FIELDS)
        fields = pick(merged, CANONICAL_FIELDS)

        own_orig = obj.get("orig")
        if own_orig is not None and not isinstance(own_orig, Mapping):
            logger.debug(f"Ignoring orig of type {type(own_orig).__name__}")

        orig = deep_merge(own_orig, pick(merged, overflow))
        if "content" in orig:
            logger.debug("Discarding stored orig.content, it mirrors content")
            del orig["content"]

        data = fields["data"]
        if not isinstance(data, Mapping):
            logger.warning(
                f"Replacing data of type {type(data).__name__} with an empty mapping"
            )
            data = {}

        return FileRecord(
            path=fields["path"], content=fields["content"], data=data, orig=orig
        )


# --- PUBLIC INTERFACE ---
def coerce_input(file: Any) -> Optional[FileInput]:
    """Resolve raw input to a RawString or PartialRecord (None when falsy)."""
    return FileNormalizer().coerce(file)


def merge_data(
    obj: Mapping, local_data: Any = None, props: Optional[Iterable[str]] = None
) -> Dict[str, Any]:
    """
    Return the merged `data` of `obj`.

    If `local_data` is supplied, its properties win over the `locals` and
    `data` properties of `obj`. If it is a list, it names the properties
    to merge instead.
    """
    return FileNormalizer().merge_data(obj, local_data, props)


def sift_keys(obj: Mapping, props: Optional[Iterable[str]] = None) -> FileRecord:
    """Return a FileRecord holding only canonical fields, extras under `orig`."""
    return FileNormalizer().sift_keys(obj, props)


def extend_file(file: Any, options: Optional[Mapping] = None) -> FileRecord:
    """
    Extend and normalize a file so that it has the properties expected by
    the next parser.

    This is the primary public API.

    Args:
        file: Content string, mapping or FileRecord
        options: Data that should win over the file's own data

    Returns:
        A new FileRecord with exactly `path`, `content`, `data` and `orig`.

    Example:
        >>> extend_file({"content": "foo", "title": "Bar"}).to_dict()
        {'path': '', 'content': 'foo', 'data': {}, 'orig': {'title': 'Bar', 'content': 'foo'}}
    """
    return FileNormalizer().extend(file, options)
