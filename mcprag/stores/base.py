"""Query term matching shared by the document store backends."""

MIN_TERM_LENGTH = 3


def query_terms(query: str) -> list[str]:
    """Split a query into lowercase search terms.

    Terms shorter than ``MIN_TERM_LENGTH`` are dropped and duplicates removed
    while keeping first-seen order.

    Returns:
        list[str]: Search terms.
    """
    terms = [term.lower() for term in query.split() if len(term) >= MIN_TERM_LENGTH]
    return list(dict.fromkeys(terms))


def matches(text: str, terms: list[str]) -> bool:
    """Check whether any term occurs in ``text``, ignoring case.

    Returns:
        bool: True if at least one term is found.
    """
    lowered = text.lower()
    return any(term in lowered for term in terms)


def resolve_limit(limit: int | None, default: int) -> int:
    """Pick the per-search result cap, falling back to ``default``.

    Returns:
        int: The cap to apply.

    Raises:
        ValueError: If the resulting cap is not positive.
    """
    resolved = limit if limit is not None else default
    if resolved < 1:
        msg = f"Search limit must be positive, got {resolved}"
        raise ValueError(msg)
    return resolved
