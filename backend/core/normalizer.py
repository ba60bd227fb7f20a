"""
Metadata value normalization.

Normalizes chunk names and paths so that stored metadata and operator input
can be compared regardless of case, document suffix or path separator.

Dependencies: None
System role: Pure string helpers for client-side chunk filtering
"""

# Matched against the case-folded value
DOCUMENT_SUFFIXES: tuple[str, ...] = (".markdown", ".mdx", ".md")


def normalize_name(value: str | None) -> str:
    """
    Normalize a chunk name for comparison.

    Trims whitespace and strips trailing document suffixes (".md" and
    friends, any case), then case-folds the remainder. Suffixes are stripped
    until none is left so the function stays idempotent for values such as
    "notes.md.md".

    Args:
        value: Raw name, possibly None

    Returns:
        str: Normalized name, "" for empty input

    Example:
        >>> normalize_name("  DataWorksheet.MD ")
        'dataworksheet'
    """
    if not value:
        return ""

    normalized = value.strip().casefold()
    while True:
        suffix = next((s for s in DOCUMENT_SUFFIXES if normalized.endswith(s)), None)
        if suffix is None:
            return normalized
        normalized = normalized[: -len(suffix)].strip()


def normalize_path(value: str | None) -> str:
    """
    Normalize a chunk path for comparison.

    Trims whitespace, unifies backslashes into forward slashes and case-folds.

    Args:
        value: Raw path, possibly None

    Returns:
        str: Normalized path, "" for empty input
    """
    if not value:
        return ""
    return value.strip().replace("\\", "/").casefold()
