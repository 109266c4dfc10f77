def overlap(a: str, b: str, swap: bool = True) -> str:
    """
    What portion of `a` and `b` overlaps?

    The longest string that is both a suffix of `a` and a prefix of `b`.
    For example `overlap("abcdefg", "fgjkli")` is `"fg"`.

    :param swap: Also try `b` followed by `a` when `a` followed by `b` has no overlap
    :return: The overlapping portion, "" if there is none
    """
    if not isinstance(a, str) or not isinstance(b, str):
        return ""

    # Earliest start in `a` gives the longest suffix
    for i in range(len(a)):
        if b.startswith(a[i:]):
            return a[i:]

    if swap:
        return overlap(b, a, False)
    return ""
