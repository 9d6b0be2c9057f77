from typing import Tuple

from .errors import InvalidInput, EmptyKey

# (char, original column index), in read order
RankedKey = Tuple[Tuple[str, int], ...]


def rank(key: str) -> RankedKey:
    """Order the key's columns by character, ties left to right.

    "zebra" -> (('a', 4), ('b', 2), ('e', 1), ('r', 3), ('z', 0))
    "aab"   -> (('a', 0), ('a', 1), ('b', 2))
    """
    if key is None:
        raise InvalidInput("Missing key")
    if len(key) == 0:
        raise EmptyKey()
    pairs = [(ch, idx) for idx, ch in enumerate(key)]
    # stable sort on the char alone keeps tied columns left to right
    return tuple(sorted(pairs, key=lambda p: p[0]))


def column_order(ranked: RankedKey) -> list[int]:
    return [idx for _, idx in ranked]
