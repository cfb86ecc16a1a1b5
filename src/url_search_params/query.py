import logging
import typing as _ty
import uritools as _uritools

from .codec import decode_uri_component, encode_uri_component

log = logging.getLogger(__name__)

QueryLike: _ty.TypeAlias = (
    "str | bytes | _ty.Mapping[str, str] | _ty.Sequence[tuple[str, str]]"
)


class Query(str):
    SEPARATOR = "&"
    ASSIGNMENT = "="
    ENCODING = "utf-8"

    def __new__(cls, query: QueryLike = ""):
        if isinstance(query, str):
            pass
        elif isinstance(query, bytes):
            query = query.decode(cls.ENCODING)
        elif isinstance(query, _ty.Mapping):
            query = build_url_search_params(query)
        elif isinstance(query, _ty.Sequence):
            query = build_url_search_params(dict(query))
        else:
            raise TypeError(
                "query should be a str, bytes, a mapping or a sequence of pairs, "
                f"not {type(query).__name__!r}"
            )
        return str.__new__(cls, query)

    @classmethod
    def from_uri(cls, uri: str | bytes) -> "Query":
        query = _uritools.urisplit(uri).query
        return cls(query or "")

    def decode(query) -> list[tuple[str, str]]:
        pairs: list[tuple[str, str]] = []
        if not query.strip():
            return pairs
        for param in query.split(query.SEPARATOR):
            key, _, value = param.partition(query.ASSIGNMENT)
            if not key:
                log.debug("dropping query parameter with empty key: %r", param)
                continue
            pairs.append((decode_uri_component(key), decode_uri_component(value)))
        return pairs

    def to_dict(query) -> dict[str, str]:
        return dict(query.decode())


def parse_url_search_params(params: str | bytes) -> dict[str, str]:
    """Convert a query string into a mapping of its decoded parameters.

    The input must not carry the leading ``?`` nor a ``#fragment``. Pairs are
    split on the first ``=`` only, a pair without ``=`` gets an empty value,
    pairs with an empty key are skipped and a repeated key keeps its last
    value. Never raises for malformed input.

    >>> parse_url_search_params("key=value&another_key=its_value")
    {'key': 'value', 'another_key': 'its_value'}
    """
    if not isinstance(params, (str, bytes)):
        raise TypeError(
            f"query string should be a str or bytes, not {type(params).__name__!r}"
        )
    return Query(params).to_dict()


def build_url_search_params(params: _ty.Mapping[str, str]) -> str:
    """Convert a mapping into a query string.

    Keys and values are escaped with :func:`encode_uri_component` and the
    resulting pairs are sorted case-insensitively, so the output does not
    depend on the mapping's iteration order.

    >>> build_url_search_params({"key1&": "test1=", "key2": "test2"})
    'key1%26=test1%3D&key2=test2'
    """
    key_value_list: list[str] = []
    for key, value in params.items():
        if not isinstance(key, str) or not isinstance(value, str):
            raise TypeError(
                "query parameters should be str, "
                f"not {type(key).__name__!r}={type(value).__name__!r}"
            )
        key_value_list.append(
            Query.ASSIGNMENT.join(
                (encode_uri_component(key), encode_uri_component(value))
            )
        )
    key_value_list.sort(key=str.lower)
    return Query.SEPARATOR.join(key_value_list)
