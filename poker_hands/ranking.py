"""Winner selection over a batch of hands."""

import logging
from typing import List, Sequence

from poker_hands.rules import Hand, parse_hand

logger = logging.getLogger(__name__)


class EmptyInput(ValueError):
    """Raised when asked for the winners of an empty batch."""

    pass


def rank_hands(hands: Sequence[str]) -> List[Hand]:
    """Parse hands and sort them best first.

    The sort is stable, so tied hands keep their input order.

    Raises:
        EmptyInput: If no hands are given
        InvalidCardFormat: If any hand is malformed
    """
    if not hands:
        raise EmptyInput("Cannot rank an empty batch of hands")
    return sorted((parse_hand(text) for text in hands), reverse=True)


def winning_hands(hands: Sequence[str]) -> List[str]:
    """Return the hands tied for best.

    Args:
        hands: Hand strings such as "4S 5S 6S 8D 3C"

    Returns:
        The winning input strings themselves, in input order. Hands that tie
        exactly are all returned, even if their cards differ.

    Raises:
        EmptyInput: If no hands are given
        InvalidCardFormat: If any hand is malformed
    """
    if not hands:
        raise EmptyInput("Cannot pick a winner from an empty batch of hands")

    parsed = [parse_hand(text) for text in hands]
    best = max(parsed)
    winners = [hand.source_text for hand in parsed if hand == best]

    logger.debug("%d of %d hands tie for best with %s", len(winners), len(parsed), best.describe())
    return winners
