"""Wildcard matching of namespaces against specification patterns."""


def matches(candidate: str, pattern: str) -> bool:
    """Return True if *candidate* matches *pattern* in full.

    ``*`` matches any run of characters, including none.  It is the only
    metacharacter; everything else compares literally and case-sensitively.
    On a mismatch the scan backtracks to the most recent ``*`` and lets it
    absorb one more character.  Worst case is quadratic in the input length,
    which is fine for namespace-sized strings.

    Args:
        candidate: The namespace being tested (e.g. ``"worker:a"``).
        pattern: A single pattern from a specification (e.g. ``"worker:*"``).

    Returns:
        Whether the whole candidate is matched by the whole pattern.
    """
    c_idx = 0
    p_idx = 0
    star_idx = -1
    resume_idx = 0

    while c_idx < len(candidate):
        if p_idx < len(pattern) and pattern[p_idx] == "*":
            star_idx = p_idx
            resume_idx = c_idx
            p_idx += 1
        elif p_idx < len(pattern) and pattern[p_idx] == candidate[c_idx]:
            c_idx += 1
            p_idx += 1
        elif star_idx != -1:
            p_idx = star_idx + 1
            resume_idx += 1
            c_idx = resume_idx
        else:
            return False

    while p_idx < len(pattern) and pattern[p_idx] == "*":
        p_idx += 1

    return p_idx == len(pattern)
