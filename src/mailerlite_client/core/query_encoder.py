"""
Query string encoding for list options and filters.
"""
import logging
from typing import Any, Dict, Iterable, List, Mapping, Tuple, Union
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from pydantic import BaseModel

from ..types import Filter

logger = logging.getLogger("mailerlite_client.query_encoder")

FILTERS_FIELD = "filters"

QueryPairs = List[Tuple[str, str]]
QueryOptions = Union[BaseModel, Mapping[str, Any], None]


def is_zero(value: Any) -> bool:
    """Zero values are left out of the query entirely."""
    if value is None:
        return True
    if isinstance(value, bool):
        return value is False
    if isinstance(value, (int, float)):
        return value == 0
    if isinstance(value, (str, bytes, list, tuple, dict, set)):
        return len(value) == 0
    return False


def stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def filter_key(name: str) -> str:
    return f"filter[{name}]"


def _coerce_filters(raw: Any) -> List[Filter]:
    if raw is None:
        return []
    if isinstance(raw, Filter):
        return [raw]
    if isinstance(raw, Mapping):
        return [Filter(name=str(k), value=v) for k, v in raw.items()]
    filters = []
    for item in raw:
        if isinstance(item, Filter):
            filters.append(item)
        elif isinstance(item, Mapping):
            filters.append(Filter(name=item["name"], value=item.get("value")))
        else:
            name, value = item
            filters.append(Filter(name=name, value=value))
    return filters


def encode_filters(filters: Iterable[Filter]) -> QueryPairs:
    """Encode filters as ``filter[name]=value`` pairs, keeping their order."""
    pairs: QueryPairs = []
    for f in filters:
        if is_zero(f.value):
            continue
        pairs.append((filter_key(f.name), stringify(f.value)))
    return pairs


def _encode_value(key: str, value: Any) -> QueryPairs:
    if is_zero(value):
        return []
    if isinstance(value, (list, tuple)):
        return [(key, stringify(v)) for v in value if not is_zero(v)]
    return [(key, stringify(value))]


def _iter_model_fields(options: BaseModel) -> Iterable[Tuple[str, Any]]:
    for name, info in type(options).model_fields.items():
        if info.exclude:
            continue
        yield info.alias or name, getattr(options, name)


def encode_query(options: QueryOptions) -> QueryPairs:
    """
    Convert an options object into ordered query pairs.

    Args:
        options: pydantic options model, plain mapping, or None

    Returns:
        List of (key, value) pairs; empty when every field is a zero value
    """
    if options is None:
        return []

    if isinstance(options, BaseModel):
        items = _iter_model_fields(options)
    else:
        items = options.items()

    pairs: QueryPairs = []
    for key, value in items:
        if key == FILTERS_FIELD:
            pairs.extend(encode_filters(_coerce_filters(value)))
        else:
            pairs.extend(_encode_value(key, value))
    return pairs


def encode_body_options(options: QueryOptions) -> Dict[str, Any]:
    """
    Same zero-value rules as encode_query, shaped as a JSON body.

    Filters are nested under ``filter`` as ``{name: value}``.
    """
    if options is None:
        return {}

    if isinstance(options, BaseModel):
        items = _iter_model_fields(options)
    else:
        items = options.items()

    body: Dict[str, Any] = {}
    for key, value in items:
        if key == FILTERS_FIELD:
            active = {f.name: f.value for f in _coerce_filters(value) if not is_zero(f.value)}
            if active:
                body["filter"] = active
        elif not is_zero(value):
            body[key] = value
    return body


def to_query_string(pairs: QueryPairs) -> str:
    # brackets stay literal: filter[status]=active
    return urlencode(pairs, safe="[]")


def add_options(url: str, options: QueryOptions) -> str:
    """
    Append encoded options to a URL.

    A None options object leaves the URL untouched. Any query already on the
    URL is kept in front of the new pairs.
    """
    if options is None:
        return url

    new_pairs = encode_query(options)
    if not new_pairs:
        return url

    parts = urlsplit(url)
    pairs = parse_qsl(parts.query, keep_blank_values=True) + new_pairs
    query = to_query_string(pairs)
    logger.debug(f"add_options: url={url}, query={query}")
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))
