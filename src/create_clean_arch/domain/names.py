"""Project name normalisation.

The canonical name is the npm scope of every generated package, so it is
restricted to lower-case letters, digits and hyphens.

INVARIANT: ``normalise(normalise(x)) == normalise(x)`` whenever the first
call succeeds.
"""

from __future__ import annotations

import re

from create_clean_arch.domain.errors import InvalidName

NAME_PATTERN = re.compile(r"^[a-z0-9-]+$")

_WHITESPACE = re.compile(r"\s+")


def normalise(raw: str) -> str:
    """Return the canonical project name for *raw*.

    Trims, lower-cases and collapses interior whitespace runs to a single
    hyphen, then validates the result.

    Raises:
        InvalidName: if the result is empty or has characters outside
            ``[a-z0-9-]``.
    """
    candidate = _WHITESPACE.sub("-", raw.strip().lower())
    if not candidate:
        raise InvalidName("Project name must not be empty", raw=raw)
    if NAME_PATTERN.match(candidate) is None:
        msg = (
            f"Invalid project name {candidate!r}: "
            "only lower-case letters, digits and hyphens are allowed"
        )
        raise InvalidName(msg, raw=raw, normalised=candidate)
    return candidate


def validate_name(raw: str) -> bool | str:
    """Prompt validator: ``True`` when *raw* normalises, else the rejection message."""
    try:
        normalise(raw)
    except InvalidName as exc:
        return exc.message
    return True
