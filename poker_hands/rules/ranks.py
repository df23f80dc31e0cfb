"""Card rank definitions and utilities.

Rank order (high to low): A > K > Q > J > 10 > 9 > 8 > 7 > 6 > 5 > 4 > 3 > 2

The ace is high everywhere except in an A-2-3-4-5 straight, where the
straight detector lowers it to ``Rank.LOW_ACE``.

This module provides:
- Rank and suit constants
- Card representation and parsing
- Rank helpers used by hand classification
"""

import re
from dataclasses import dataclass
from enum import IntEnum
from functools import total_ordering
from typing import List


class Rank(IntEnum):
    """Card ranks ordered by strength (higher value = stronger rank)."""

    LOW_ACE = 1  # Only produced by ace-low straight normalization
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


class Suit(IntEnum):
    """Card suits. Suits never affect ordering."""

    HEART = 0
    DIAMOND = 1
    CLUB = 2
    SPADE = 3


# Rank symbols for display and parsing
RANK_SYMBOLS = {
    Rank.LOW_ACE: "A",
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "10",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
    Rank.ACE: "A",
}

SUIT_SYMBOLS = {
    Suit.HEART: "H",
    Suit.DIAMOND: "D",
    Suit.CLUB: "C",
    Suit.SPADE: "S",
}

# Symbol to rank mapping (for parsing). An "A" token is always the high ace.
SYMBOL_TO_RANK = {v: k for k, v in RANK_SYMBOLS.items() if k != Rank.LOW_ACE}
SYMBOL_TO_SUIT = {v: k for k, v in SUIT_SYMBOLS.items()}

CARD_PATTERN = re.compile(r"([2-9]|10|[JQKA])([HDSC])")


class InvalidCardFormat(ValueError):
    """Raised when a card token or a hand string is malformed."""

    pass


@total_ordering
@dataclass(frozen=True, eq=False)
class Card:
    """A playing card with rank and suit.

    Cards compare and hash by rank only: two cards of the same rank are
    interchangeable when grouping a hand. Physical identity (rank and suit)
    is available through ``identity``.
    """

    rank: Rank
    suit: Suit

    def __post_init__(self):
        try:
            object.__setattr__(self, "rank", Rank(self.rank))
            object.__setattr__(self, "suit", Suit(self.suit))
        except ValueError as exc:
            raise InvalidCardFormat(f"Invalid card: rank={self.rank!r} suit={self.suit!r}") from exc

    def __eq__(self, other):
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank == other.rank

    def __lt__(self, other):
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank < other.rank

    def __hash__(self) -> int:
        return hash(int(self.rank))

    def __str__(self) -> str:
        return f"{RANK_SYMBOLS[self.rank]}{SUIT_SYMBOLS[self.suit]}"

    def __repr__(self) -> str:
        return f"Card({self})"

    @property
    def identity(self) -> tuple:
        """(rank, suit) pair identifying the physical card."""
        return (int(self.rank), int(self.suit))

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Parse a card from a token like '4H', '10S' or 'AD'.

        Args:
            s: Card token in format "RANK+SUIT"

        Returns:
            Card object

        Raises:
            InvalidCardFormat: If the token does not match the card grammar
        """
        match = CARD_PATTERN.fullmatch(s)
        if match is None:
            raise InvalidCardFormat(f"'{s}' is not a valid card")
        rank_str, suit_char = match.groups()
        return cls(rank=SYMBOL_TO_RANK[rank_str], suit=SYMBOL_TO_SUIT[suit_char])


def lower_aces(cards: List[Card]) -> List[Card]:
    """Return a copy of the cards with every ace moved to ``Rank.LOW_ACE``."""
    return [Card(rank=Rank.LOW_ACE, suit=c.suit) if c.rank == Rank.ACE else c for c in cards]


def are_consecutive(ranks: List[Rank]) -> bool:
    """Check if a sorted list of unique ranks are consecutive.

    Args:
        ranks: List of ranks (should be sorted ascending)

    Returns:
        True if all ranks are consecutive
    """
    if len(ranks) < 2:
        return True

    for i in range(1, len(ranks)):
        if int(ranks[i]) - int(ranks[i - 1]) != 1:
            return False
    return True


def same_rank(cards) -> bool:
    """True if every card shares the first card's rank."""
    return all(card.rank == cards[0].rank for card in cards)


def same_suit(cards) -> bool:
    """True if every card shares the first card's suit."""
    return all(card.suit == cards[0].suit for card in cards)


def sort_cards(cards: List[Card]) -> List[Card]:
    """Sort cards by rank, highest first.

    Args:
        cards: List of Card objects

    Returns:
        New sorted list of cards
    """
    return sorted(cards, reverse=True)


def make_cards_from_string(s: str) -> List[Card]:
    """Parse cards from a string like "3H 4D 5C 6S 7H".

    Args:
        s: Whitespace-separated card tokens

    Returns:
        List of Card objects
    """
    return [Card.from_string(token) for token in s.split()]
