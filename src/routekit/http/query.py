"""Immutable query string parameters.

Implements ``Mapping[str, str]``. Blank values are kept so that a bare
indicator such as ``?ajax`` still counts as present.
"""

from collections.abc import Iterator, Mapping
from urllib.parse import parse_qs


class QueryParams(Mapping[str, str]):
    """Immutable query string parameters.

    ``__getitem__`` returns the first value for a key.
    """

    _data: dict[str, list[str]]
    _raw: str

    __slots__ = ("_data", "_raw")

    def __init__(self, query_string: str | bytes = "") -> None:
        if isinstance(query_string, bytes):
            query_string = query_string.decode("latin-1")
        object.__setattr__(self, "_raw", query_string)
        parsed = parse_qs(query_string, keep_blank_values=True)
        object.__setattr__(self, "_data", parsed)

    def __getitem__(self, key: str) -> str:
        return self._data[key][0]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {self[k]!r}" for k in self)
        return f"QueryParams({{{items}}})"

    def __bool__(self) -> bool:
        return bool(self._data)

    @property
    def raw(self) -> str:
        """The undecoded query string, without the leading ``?``."""
        return self._raw

    def get(self, key: str, default: str | None = None) -> str | None:  # type: ignore[override]
        """Return the first value for *key*, or *default* if missing."""
        values = self._data.get(key)
        if values:
            return values[0]
        return default


def split_url(url: str) -> tuple[str, QueryParams]:
    """Split a request URL into its path and parsed query string.

    ``"/user/5?ajax=1"`` -> ``("/user/5", QueryParams({'ajax': '1'}))``
    """
    path, _, query_string = url.partition("?")
    return path, QueryParams(query_string)
