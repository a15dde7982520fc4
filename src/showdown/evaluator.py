"""Showdown evaluation - comparing hands and determining winners."""

import logging
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

from .errors import EmptyInputError
from .hand import Classification, Hand
from .ordering import Ordering, compare

logger = logging.getLogger(__name__)


@dataclass
class ShowdownResult:
    """Result of evaluating a showdown."""

    winners: list[Hand]
    all_hands: list[Hand]  # input order
    best: Classification

    @property
    def is_tie(self) -> bool:
        return len(self.winners) > 1

    @property
    def winner(self) -> Hand | None:
        """Get the single winner, or None if tie."""
        if len(self.winners) == 1:
            return self.winners[0]
        return None


def classify_all(hands: Sequence[Hand], max_workers: int = 1) -> list[Classification]:
    """Classify every hand, optionally on a thread pool.

    Each hand is independent, so the pool needs no coordination beyond
    collecting results in input order.
    """
    if max_workers <= 1 or len(hands) <= 1:
        return [h.classification for h in hands]

    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        return list(pool.map(lambda h: h.classification, hands))


def select_winners(hands: Sequence[Hand], max_workers: int = 1) -> ShowdownResult:
    """Evaluate all hands and determine winner(s).

    Args:
        hands: Hands to compare, in the order the caller wants them reported
        max_workers: Threads used to classify; 1 classifies inline

    Returns:
        ShowdownResult whose winners keep input order and labels
    """
    if not hands:
        raise EmptyInputError("Cannot pick a winner from zero hands")

    classifications = classify_all(hands, max_workers)

    best = classifications[0]
    for c in classifications[1:]:
        if compare(c, best) is Ordering.GREATER:
            best = c

    winners = [h for h, c in zip(hands, classifications) if compare(c, best) is Ordering.EQUAL]
    logger.debug("%d of %d hands win with %s %s", len(winners), len(hands), best.category.name, best.key)

    return ShowdownResult(winners=winners, all_hands=list(hands), best=best)


def winning_hands(hands: Sequence[str], max_workers: int = 1) -> list[str]:
    """Return the winning hand strings, exactly as they were passed in.

    >>> winning_hands(["2H 2D 2S 9C 9D", "3H 3D 3S 5C 5D"])
    ['3H 3D 3S 5C 5D']
    """
    parsed = [Hand.from_str(h, label=h) for h in hands]
    result = select_winners(parsed, max_workers=max_workers)
    return [h.label for h in result.winners]
