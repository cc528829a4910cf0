"""Term normalization and small text helpers."""


def normalize_term(term: str, policy: str = "exact") -> str:
    """Return the comparison key for a term under a normalization policy.

    "exact" compares strings as given; "casefold" ignores case and
    surrounding whitespace.
    """
    if policy == "casefold":
        return term.strip().casefold()
    return term


def term_keys(terms: list[str] | None, policy: str = "exact") -> set[str]:
    return {normalize_term(t, policy) for t in terms or []}


def capitalize_first(text: str) -> str:
    """Uppercase the first character only ("senior" -> "Senior")."""
    return text[:1].upper() + text[1:]


def join_terms(terms: list[str], limit: int = 2) -> str:
    """Join up to `limit` terms with "and" ("AI and Cloud")."""
    return " and ".join(terms[:limit])


def truncate(text: str, max_length: int) -> str:
    if len(text) <= max_length:
        return text
    return text[: max_length - 3].rstrip() + "..."
