"""Five-card poker hand classification."""

import logging
from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import IntEnum
from functools import cached_property
from typing import Any, Self

from .card import Card, Rank
from .errors import ValidationError

logger = logging.getLogger(__name__)

HAND_SIZE = 5

_WHEEL = frozenset({Rank.ACE, Rank.TWO, Rank.THREE, Rank.FOUR, Rank.FIVE})


class Category(IntEnum):
    """Poker hand categories from lowest to highest."""

    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8
    ROYAL_FLUSH = 9

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


@dataclass(frozen=True, slots=True, order=True)
class Classification:
    """Comparable result of classifying a hand.

    Comparison works by:
    1. Category (pair beats high card, etc.)
    2. Tie-break key, element by element (e.g. pair rank, then kickers)
    """

    category: Category
    key: tuple[int, ...]

    def __str__(self) -> str:
        return str(self.category)

    def describe(self) -> str:
        """Human description, e.g. "Full House, 3s full of 5s"."""
        names = [_plural(r) for r in self.key]
        match self.category:
            case Category.ROYAL_FLUSH:
                return str(self.category)
            case Category.STRAIGHT_FLUSH | Category.STRAIGHT | Category.HIGH_CARD | Category.FLUSH:
                return f"{self.category}, {Rank(self.key[0]).symbol} high"
            case Category.FOUR_OF_A_KIND | Category.THREE_OF_A_KIND | Category.ONE_PAIR:
                return f"{self.category}, {names[0]}"
            case Category.FULL_HOUSE:
                return f"{self.category}, {names[0]} full of {names[1]}"
            case Category.TWO_PAIR:
                return f"{self.category}, {names[0]} and {names[1]}"
        return str(self.category)


def _plural(rank: int) -> str:
    return f"{Rank(rank).symbol}s"


def classify(cards: Sequence[Card]) -> Classification:
    """Classify exactly five cards into a category and tie-break key."""
    if len(cards) != HAND_SIZE:
        raise ValidationError(
            f"A hand needs exactly {HAND_SIZE} cards, got {len(cards)}",
            count=len(cards),
        )

    rank_counts: Counter[Rank] = Counter()
    suit_counts: Counter = Counter()
    for c in cards:
        rank_counts[c.rank] += 1
        suit_counts[c.suit] += 1

    is_flush = HAND_SIZE in suit_counts.values()
    straight_high = _straight_high(rank_counts)
    counts = sorted(rank_counts.values(), reverse=True)

    if is_flush and straight_high == Rank.ACE:
        category = Category.ROYAL_FLUSH
    elif is_flush and straight_high:
        category = Category.STRAIGHT_FLUSH
    elif counts[0] == 4:
        category = Category.FOUR_OF_A_KIND
    elif counts[:2] == [3, 2]:
        category = Category.FULL_HOUSE
    elif is_flush:
        category = Category.FLUSH
    elif straight_high:
        category = Category.STRAIGHT
    elif counts[0] == 3:
        category = Category.THREE_OF_A_KIND
    elif counts[:2] == [2, 2]:
        category = Category.TWO_PAIR
    elif counts[0] == 2:
        category = Category.ONE_PAIR
    else:
        category = Category.HIGH_CARD

    if straight_high:
        key: tuple[int, ...] = (straight_high,)
    else:
        key = _group_key(rank_counts)

    result = Classification(category, key)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("classified %s as %s %s", " ".join(c.code for c in cards), category.name, key)
    return result


def _straight_high(rank_counts: Counter[Rank]) -> int:
    """Return the straight's high card, or 0 if the ranks are not a straight."""
    if len(rank_counts) != HAND_SIZE:
        return 0

    # Normal straight: five distinct ranks with a span of exactly four.
    high, low = max(rank_counts), min(rank_counts)
    if high - low == HAND_SIZE - 1:
        return int(high)

    # Wheel (A-2-3-4-5): the only place an ace plays low.
    if rank_counts.keys() == _WHEEL:
        return int(Rank.FIVE)

    return 0


def _group_key(rank_counts: Counter[Rank]) -> tuple[int, ...]:
    """Ranks ordered by count descending, then rank descending."""
    groups = sorted(rank_counts.items(), key=lambda item: (item[1], item[0]), reverse=True)
    return tuple(int(rank) for rank, _ in groups)


@dataclass(frozen=True)
class Hand:
    """A five-card poker hand with an optional caller-supplied label.

    The label is whatever the caller wants back when this hand wins
    (its original text, a player id, ...). It is never inspected.
    Cards are stored as a tuple and cannot be replaced, so the cached
    classification always matches them.
    """

    cards: tuple[Card, ...]
    label: Any = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if len(self.cards) != HAND_SIZE:
            raise ValidationError(
                f"A hand needs exactly {HAND_SIZE} cards, got {len(self.cards)}",
                count=len(self.cards),
            )
        object.__setattr__(self, "cards", tuple(sorted(self.cards, key=lambda c: c.rank, reverse=True)))

    @classmethod
    def from_cards(cls, *cards: Card, label: Any = None) -> Self:
        """Create a hand from cards."""
        return cls(cards=cards, label=label)

    @classmethod
    def from_str(cls, s: str, label: Any = None) -> Self:
        """Parse a hand from five space-separated card codes, e.g. "4D 5D 6D 7D 8D".

        The original string becomes the label unless one is given.
        """
        codes = s.split(" ")
        if len(codes) != HAND_SIZE or not all(codes):
            raise ValidationError(
                f"Expected {HAND_SIZE} card codes separated by single spaces, got {s!r}",
                count=len([c for c in codes if c]),
            )
        return cls(cards=tuple(Card.from_str(code) for code in codes), label=s if label is None else label)

    @classmethod
    def parse_many(cls, hands: Iterable[str]) -> list[Self]:
        return [cls.from_str(h) for h in hands]

    @cached_property
    def classification(self) -> Classification:
        return classify(self.cards)

    @property
    def category(self) -> Category:
        return self.classification.category

    @property
    def code(self) -> str:
        """Canonical text form, highest card first."""
        return " ".join(c.code for c in self.cards)

    def __str__(self) -> str:
        return " ".join(str(c) for c in self.cards)
