"""Poker Hands - five-card hand classification and winner selection.

Classifies five-card poker hands, orders them, and picks the winners
of a batch.
"""

__version__ = "0.1.0"
__author__ = "Poker Hands Team"

from poker_hands.ranking import EmptyInput, rank_hands, winning_hands
from poker_hands.rules import Hand, HandType, InvalidCardFormat, parse_hand

__all__ = [
    "__version__",
    "EmptyInput",
    "Hand",
    "HandType",
    "InvalidCardFormat",
    "parse_hand",
    "rank_hands",
    "winning_hands",
]
