"""Ordering of classified hands."""

from enum import Enum

from .hand import Classification, Hand


class Ordering(Enum):
    """Outcome of comparing two classifications."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


def compare(a: Classification, b: Classification) -> Ordering:
    """Compare two classifications: category first, then the tie-break key.

    Keys are compared element by element and the first difference
    decides. Hands of the same category always have keys of the same
    length, so running out of elements means the hands are equal.
    """
    if a.category != b.category:
        return Ordering.GREATER if a.category > b.category else Ordering.LESS

    for x, y in zip(a.key, b.key):
        if x != y:
            return Ordering.GREATER if x > y else Ordering.LESS
    return Ordering.EQUAL


def compare_hands(hand1: Hand, hand2: Hand) -> int:
    """Compare two hands.

    Returns:
        1 if hand1 wins, -1 if hand2 wins, 0 if tie
    """
    return compare(hand1.classification, hand2.classification).value
