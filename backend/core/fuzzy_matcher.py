"""
Fuzzy metadata matching.

The remote index can only filter by exact equality, so partial matches on
module, name and path are decided client-side with this helper.

Dependencies: None
System role: Client-side match predicate for chunk queries
"""


def matches(source: str | None, query: str | None) -> bool:
    """
    Bidirectional, case-insensitive substring test.

    True when the stored value contains the query or the query contains the
    stored value. Note that short stored values (a single character, say)
    therefore match almost any query containing them.

    Args:
        source: Stored metadata value
        query: Operator-supplied filter value

    Returns:
        bool: False if either side is empty after trimming
    """
    folded_source = (source or "").strip().casefold()
    folded_query = (query or "").strip().casefold()
    if not folded_source or not folded_query:
        return False
    return folded_query in folded_source or folded_source in folded_query
