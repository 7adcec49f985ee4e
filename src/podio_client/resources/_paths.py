from typing import Union
from urllib.parse import quote, urlencode


def segment(value: Union[int, str]) -> str:
    """Quote one path segment; slugs and external ids may contain '/'."""
    return quote(str(value), safe="")


def with_query(path: str, **params: Union[int, str]) -> str:
    # Field selectors such as items.fields(files) go out unescaped.
    return f"{path}?{urlencode(params, safe='()')}"
