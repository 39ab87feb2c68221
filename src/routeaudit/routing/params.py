"""Path parameter extraction.

Placeholders in a route pattern look like ``{id}``: ASCII letters and
digits between curly braces, nothing else.
"""

import re
from dataclasses import dataclass

# A well-formed placeholder: {identifier}
PARAM_PATTERN = re.compile(r"\{([a-zA-Z0-9]+)\}")


@dataclass(frozen=True, slots=True)
class RouteParameter:
    """A named placeholder and its zero-based position in the pattern."""

    position: int
    name: str


def extract_parameters(raw_pattern: str) -> tuple[RouteParameter, ...] | None:
    """Extract placeholders from *raw_pattern* in left-to-right order.

    Examples::

        "/users"               -> ()
        "/users/{id}"          -> (RouteParameter(0, "id"),)
        "/a/{x}/b/{y}"         -> (RouteParameter(0, "x"), RouteParameter(1, "y"))
        "/users/{id-bad}"      -> None
        "/users/{id}/{"        -> None

    Returns ``None`` when the pattern contains an opening brace that does
    not start a well-formed placeholder.  Nothing is guessed: one bad
    token invalidates the whole list.
    """
    if "{" not in raw_pattern:
        return ()

    # An opening brace left after removing the valid placeholders is malformed
    leftover = PARAM_PATTERN.sub("", raw_pattern)
    if "{" in leftover:
        return None

    return tuple(
        RouteParameter(position=i, name=name)
        for i, name in enumerate(PARAM_PATTERN.findall(raw_pattern))
    )
