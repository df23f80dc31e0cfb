"""Poker hand rules.

This module provides:
- Card and rank definitions (ranks.py)
- Hand category detection and comparison (hands.py)
"""

from .ranks import (
    Rank,
    Suit,
    Card,
    InvalidCardFormat,
    RANK_SYMBOLS,
    SUIT_SYMBOLS,
    are_consecutive,
    lower_aces,
    same_rank,
    same_suit,
    sort_cards,
    make_cards_from_string,
)

from .hands import (
    HAND_SIZE,
    HandType,
    HandCategory,
    StraightFlush,
    FourOfAKind,
    FullHouse,
    Flush,
    Straight,
    ThreeOfAKind,
    TwoPair,
    OnePair,
    HighCard,
    Hand,
    n_of_a_kind,
    find_straight,
    classify,
    parse_hand,
    is_valid_hand,
    compare_hands,
    can_beat,
)

__all__ = [
    # Ranks
    "Rank",
    "Suit",
    "Card",
    "InvalidCardFormat",
    "RANK_SYMBOLS",
    "SUIT_SYMBOLS",
    "are_consecutive",
    "lower_aces",
    "same_rank",
    "same_suit",
    "sort_cards",
    "make_cards_from_string",
    # Hands
    "HAND_SIZE",
    "HandType",
    "HandCategory",
    "StraightFlush",
    "FourOfAKind",
    "FullHouse",
    "Flush",
    "Straight",
    "ThreeOfAKind",
    "TwoPair",
    "OnePair",
    "HighCard",
    "Hand",
    "n_of_a_kind",
    "find_straight",
    "classify",
    "parse_hand",
    "is_valid_hand",
    "compare_hands",
    "can_beat",
]
