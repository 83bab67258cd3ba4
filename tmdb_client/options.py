"""Query-string suffix builder for endpoint options."""

from __future__ import annotations

from typing import Any, Collection, Mapping
from urllib.parse import quote


def build_options(
    options: Mapping[str, Any] | None,
    available: Collection[str],
) -> str:
    """Render the options an endpoint recognizes as a query suffix.

    Keys missing from ``available`` are dropped. Each kept pair becomes
    ``&key=value``, in the order of ``options``.

    Args:
        options: Caller-supplied options.
        available: Option names the endpoint accepts.

    Returns:
        Query suffix, empty if nothing is kept.

    Example:
        >>> build_options({"language": "en-US", "foo": "bar"}, {"language"})
        '&language=en-US'
    """
    if not options:
        return ""
    return "".join(
        f"&{key}={quote(str(value), safe=',')}"
        for key, value in options.items()
        if key in available
    )
