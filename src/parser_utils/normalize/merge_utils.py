# src/parser_utils/normalize/merge_utils.py

import copy
from collections.abc import Mapping
from typing import Any, Dict, Iterable, List


def deep_merge(*sources: Any) -> Dict[str, Any]:
    """
    Deep-merge mappings left to right into a new dict.

    Rules:
        - Later sources win on conflicting keys.
        - When both the existing and the incoming value are mappings,
          they are merged recursively.
        - Lists and scalars replace the existing value wholesale.
        - ``None`` is a value and overrides.
        - Sources that are not mappings (None, strings, lists) are skipped.

    Inputs are never mutated; merged values are deep copies.

    Examples:
        >>> deep_merge({"a": {"x": 1}}, {"a": {"y": 2}, "b": [1]})
        {'a': {'x': 1, 'y': 2}, 'b': [1]}
    """
    result: Dict[str, Any] = {}
    for source in sources:
        if isinstance(source, Mapping):
            _merge_into(result, source)
    return result


def _merge_into(target: Dict[str, Any], source: Mapping) -> None:
    for key, value in source.items():
        existing = target.get(key)
        if isinstance(value, Mapping) and isinstance(existing, dict):
            _merge_into(existing, value)
        elif isinstance(value, Mapping):
            nested: Dict[str, Any] = {}
            _merge_into(nested, value)
            target[key] = nested
        else:
            target[key] = copy.deepcopy(value)


def flatten_object(obj: Dict[str, Any], key: str) -> Dict[str, Any]:
    """
    Collapse ``obj[key]`` into ``obj`` when it is a mapping.

    The nested values win over same-named top-level values and ``key`` is
    dropped from the result. Returns ``obj`` itself when there is nothing
    to collapse.
    """
    nested = obj.get(key)
    if not isinstance(nested, Mapping):
        return obj
    return deep_merge(omit(obj, [key]), nested)


def pick(obj: Mapping, keys: Iterable[str]) -> Dict[str, Any]:
    """Return the items of ``obj`` whose key is in ``keys``, in ``keys`` order."""
    return {key: obj[key] for key in keys if key in obj}


def omit(obj: Mapping, keys: Iterable[str]) -> Dict[str, Any]:
    excluded = set(keys)
    return {key: value for key, value in obj.items() if key not in excluded}


def difference(keys: Iterable[str], excluded: Iterable[str]) -> List[str]:
    """Keys not in ``excluded``, first-seen order, without duplicates."""
    skip = set(excluded)
    result: List[str] = []
    for key in keys:
        if key not in skip:
            skip.add(key)
            result.append(key)
    return result
