"""Card representations for poker."""

from enum import IntEnum
from dataclasses import dataclass
from typing import Self

from .errors import InvalidRank, InvalidSuit


class Suit(IntEnum):
    """Card suits. Values don't affect poker hand ranking."""

    CLUBS = 0
    DIAMONDS = 1
    HEARTS = 2
    SPADES = 3

    @property
    def symbol(self) -> str:
        """Unicode symbol for the suit."""
        return ["♣", "♦", "♥", "♠"][self.value]

    @property
    def letter(self) -> str:
        """Single-letter code used in card text ("C", "D", "H", "S")."""
        return "CDHS"[self.value]

    @classmethod
    def _missing_(cls, value: object) -> None:
        raise InvalidSuit(f"Invalid suit value: {value!r} (expected 0-3)")

    @classmethod
    def from_letter(cls, letter: str) -> Self:
        index = "CDHS".find(letter.upper())
        if len(letter) != 1 or index < 0:
            raise InvalidSuit(f"Invalid suit: {letter!r}")
        return cls(index)

    def __str__(self) -> str:
        return self.symbol


class Rank(IntEnum):
    """Card ranks. Higher value = higher rank, ace is always 14 here.

    The ace-low reading only exists inside the wheel check in
    ``hand._straight_high``; ranks never carry a second value.
    """

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    @classmethod
    def _missing_(cls, value: object) -> None:
        raise InvalidRank(f"Invalid rank value: {value!r} (expected 2-14)")

    @property
    def could_be_low(self) -> bool:
        """True only for the ace, which may also play as 1 in A-2-3-4-5."""
        return self is Rank.ACE

    @property
    def symbol(self) -> str:
        """Short symbol for the rank."""
        if self.value <= 10:
            return str(self.value)
        return {11: "J", 12: "Q", 13: "K", 14: "A"}[self.value]

    @property
    def code(self) -> str:
        """Single-character code used in card text ("T" for ten)."""
        return "T" if self is Rank.TEN else self.symbol

    def __str__(self) -> str:
        return self.symbol


_RANK_CODES = {
    "2": Rank.TWO,
    "3": Rank.THREE,
    "4": Rank.FOUR,
    "5": Rank.FIVE,
    "6": Rank.SIX,
    "7": Rank.SEVEN,
    "8": Rank.EIGHT,
    "9": Rank.NINE,
    "10": Rank.TEN,
    "T": Rank.TEN,
    "J": Rank.JACK,
    "Q": Rank.QUEEN,
    "K": Rank.KING,
    "A": Rank.ACE,
}


@dataclass(frozen=True, slots=True)
class Card:
    """A playing card with rank and suit."""

    rank: Rank
    suit: Suit

    def __post_init__(self) -> None:
        # Accept plain ints but store the enum, so Card(14, Suit.HEARTS) works.
        object.__setattr__(self, "rank", Rank(self.rank))
        object.__setattr__(self, "suit", Suit(self.suit))

    @property
    def code(self) -> str:
        """Text code such as "AH" or "TD"."""
        return f"{self.rank.code}{self.suit.letter}"

    def __str__(self) -> str:
        return f"{self.rank.symbol}{self.suit.symbol}"

    def __repr__(self) -> str:
        return f"Card({self.code})"

    @classmethod
    def from_str(cls, s: str) -> Self:
        """Parse a card from text like 'AH', 'TD', '10s', '2c'.

        Rank: 2-9, T (or 10), J, Q, K, A
        Suit: C(lubs), D(iamonds), H(earts), S(pades)
        """
        s = s.strip().upper()
        if not 2 <= len(s) <= 3:
            raise InvalidRank(f"Invalid card string: {s!r}")

        suit = Suit.from_letter(s[-1])

        rank_str = s[:-1]
        if rank_str not in _RANK_CODES:
            raise InvalidRank(f"Invalid rank: {rank_str!r}")

        return cls(rank=_RANK_CODES[rank_str], suit=suit)


# Convenience function
def card(s: str) -> Card:
    """Shorthand for Card.from_str()."""
    return Card.from_str(s)
