"""Placeholder converters for route patterns.

Built-in converters for placeholders like ``{id:int}``. Captured values
stay strings; the converter only decides what a placeholder accepts.
"""


# placeholder type -> regex fragment
CONVERTERS: dict[str, str] = {
    "str": r"[^/]+",
    "int": r"[0-9]+",
    "float": r"[0-9]+(?:\.[0-9]+)?",
    "alpha": r"[0-9A-Za-z]+",
    "hex": r"[0-9A-Fa-f]+",
    "slug": r"[-\w]+",
    "path": r".+",
}


def converter_regex(param_type: str) -> str:
    """Return the regex fragment for *param_type*.

    Raises ``KeyError`` if *param_type* is not a registered converter.
    """
    return CONVERTERS[param_type]
