"""Conversion of free-form identifiers into legal path segment names.

The hierarchical store restricts which characters a path segment may hold.
Only a conservative subset of what stores usually accept is allowed here, so
a sanitized name is legal for every store implementation.
"""

import string

__all__ = [
    "ALLOWED_CHARS",
    "REPLACEMENT_CHAR",
    "filter_name",
    "is_legal_name",
]

ALLOWED_CHARS = frozenset(string.ascii_letters + " " + string.digits + "_,.-+#!?$%&()=")

REPLACEMENT_CHAR = "_"


def filter_name(resource_name: str) -> str:
    """Filter a suggested name for characters that are not allowed and replace them.

    Every character outside ``ALLOWED_CHARS`` becomes ``REPLACEMENT_CHAR``.
    A run of replacement characters, literal underscores included, collapses
    into one. A name starting with a digit is prefixed with the replacement
    character. The result is never empty.

    Literal underscores take part in the collapsing even though ``_`` is an
    allowed character, so ``"a__b"`` becomes ``"a_b"``. The output therefore
    never holds two markers in a row, at the price of rewriting input that
    uses only allowed characters but contains ``__``. Such input does not
    count as legal (see :func:`is_legal_name`).

    Args:
        resource_name: The suggested name, usually a job type or topic.

    Returns:
        The filtered name. Legal names, and everything this function
        returns, come back unchanged.

    Example:
        >>> filter_name("org/apache/sling/event")
        'org_apache_sling_event'
        >>> filter_name("123abc")
        '_123abc'
        >>> filter_name("")
        '_'
    """
    out: list[str] = []

    for i, c in enumerate(resource_name):
        if c not in ALLOWED_CHARS:
            c = REPLACEMENT_CHAR
        elif i == 0 and c.isdigit():
            out.append(REPLACEMENT_CHAR)

        # do not add several replacement chars in a row
        if c == REPLACEMENT_CHAR and out and out[-1] == REPLACEMENT_CHAR:
            continue
        out.append(c)

    return "".join(out) or REPLACEMENT_CHAR


def is_legal_name(name: str) -> bool:
    """Check whether ``name`` is a fixed point of :func:`filter_name`."""
    return filter_name(name) == name
