"""Showdown - five-card poker hand ranking and winner selection."""

__version__ = "0.1.0"

from .card import Card, Rank, Suit, card
from .errors import EmptyInputError, InvalidRank, InvalidSuit, ShowdownError, ValidationError
from .evaluator import ShowdownResult, classify_all, select_winners, winning_hands
from .hand import Category, Classification, Hand, classify
from .ordering import Ordering, compare, compare_hands

__all__ = [
    "Card",
    "Category",
    "Classification",
    "EmptyInputError",
    "Hand",
    "InvalidRank",
    "InvalidSuit",
    "Ordering",
    "Rank",
    "ShowdownError",
    "ShowdownResult",
    "Suit",
    "ValidationError",
    "card",
    "classify",
    "classify_all",
    "compare",
    "compare_hands",
    "select_winners",
    "winning_hands",
]
