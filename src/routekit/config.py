"""Router configuration.

RouterConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Router configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RouterConfig(
            base_url="https://example.com",
            parameters_to_target=("app", "controller", "action"),
        )
    """

    # URL generation
    base_url: str = ""

    # Output format
    default_format: str = "html"
    allowed_formats: tuple[str, ...] = ("html", "xml", "json", "file")

    # Captured parameters that belong to the dispatch target, not to params
    parameters_to_target: tuple[str, ...] = ()

    # AJAX detection
    ajax_suffix: str = "/ajax"
    ajax_query_param: str | None = "ajax"  # None disables the query-string signal

    # Route ordering — names with this prefix are matched after app routes
    generic_prefix: str = "generic."

    # Fallbacks when neither an argument nor an ambient request is available
    default_method: str = "GET"
    default_url: str = "/"
