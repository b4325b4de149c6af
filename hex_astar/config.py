"""Search configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SearchConfig:
    """Immutable options for a single path search.

    The search always ends when the goal leaves the frontier. Entries are
    popped in score order, so at that point nothing still queued can beat the
    goal's score and no further draining is needed.

    Attributes:
        validate_input: Reject a missing or out-of-grid start cell, negative or
            NaN complexities, and malformed cubic coordinates with
            ``MalformedInputError`` before searching.
    """

    validate_input: bool = True
