"""Convert URL query strings to mappings and back.

Works on the query component only: the leading ``?`` and any ``#fragment``
are not part of a query string and must be stripped by the caller.
"""

from .codec import decode_uri_component, encode_uri_component
from .query import Query, build_url_search_params, parse_url_search_params
from .symbols import SYMBOL, Symbol
