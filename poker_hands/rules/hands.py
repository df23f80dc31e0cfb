"""Hand category detection, parsing, and comparison.

Categories (weakest to strongest):
- High card: no other category applies
- One pair: two cards of the same rank
- Two pair: two disjoint pairs
- Three of a kind: three cards of the same rank
- Straight: five consecutive ranks (A-2-3-4-5 plays as 5-high)
- Flush: five cards of one suit
- Full house: three of a kind plus a pair
- Four of a kind: four cards of the same rank
- Straight flush: a straight whose cards share one suit

Comparison rules:
- Different categories: the category decides
- Same category: the groups carried by the category are compared in order.
  A same-rank group compares by its rank; a list of cards compares by its
  ranks sorted highest first.
"""

import itertools
import logging
from dataclasses import dataclass, field
from enum import IntEnum, auto
from functools import total_ordering
from typing import ClassVar, Optional, Sequence, Tuple

from .ranks import (
    Card,
    Rank,
    InvalidCardFormat,
    are_consecutive,
    lower_aces,
    make_cards_from_string,
    same_rank,
    same_suit,
    sort_cards,
)

logger = logging.getLogger(__name__)

HAND_SIZE = 5

CardGroup = Tuple[Card, ...]


class HandType(IntEnum):
    """Poker hand categories, weakest first."""

    HIGH_CARD = auto()
    ONE_PAIR = auto()
    TWO_PAIR = auto()
    THREE_OF_A_KIND = auto()
    STRAIGHT = auto()
    FLUSH = auto()
    FULL_HOUSE = auto()
    FOUR_OF_A_KIND = auto()
    STRAIGHT_FLUSH = auto()


_RANK_NAMES = {
    Rank.LOW_ACE: "Ace",
    Rank.JACK: "Jack",
    Rank.QUEEN: "Queen",
    Rank.KING: "King",
    Rank.ACE: "Ace",
}


def _rank_name(rank: Rank) -> str:
    return _RANK_NAMES.get(rank, str(int(rank)))


def _rank_name_plural(rank: Rank) -> str:
    return f"{_rank_name(rank)}s"


def _group_rank(group: CardGroup) -> int:
    return int(group[0].rank)


def _descending(cards: CardGroup) -> Tuple[int, ...]:
    return tuple(int(card.rank) for card in sort_cards(list(cards)))


@total_ordering
class HandCategory:
    """Base class for the category variants.

    Each variant carries exactly the card groups needed to break a tie with
    another hand of the same category. Equality, ordering and hashing all
    derive from ``sort_key`` so they can never disagree.
    """

    hand_type: ClassVar[HandType]

    def tiebreak(self) -> Tuple[int, ...]:
        """Ranks compared, in order, against a hand of the same category."""
        raise NotImplementedError

    def describe(self) -> str:
        """Human-readable name, e.g. 'Full House, Jacks over 9s'."""
        raise NotImplementedError

    def sort_key(self) -> Tuple[int, Tuple[int, ...]]:
        return (int(self.hand_type), self.tiebreak())

    def __eq__(self, other):
        if not isinstance(other, HandCategory):
            return NotImplemented
        return self.sort_key() == other.sort_key()

    def __lt__(self, other):
        if not isinstance(other, HandCategory):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __hash__(self) -> int:
        return hash(self.sort_key())


@dataclass(frozen=True, eq=False)
class StraightFlush(HandCategory):
    """Five suited cards in sequence, aces already normalized."""

    hand_type: ClassVar[HandType] = HandType.STRAIGHT_FLUSH
    cards: CardGroup

    def tiebreak(self) -> Tuple[int, ...]:
        return _descending(self.cards)

    def describe(self) -> str:
        top = max(self.cards).rank
        if top == Rank.ACE:
            return "Royal Flush"
        return f"Straight Flush, {_rank_name(top)} high"


@dataclass(frozen=True, eq=False)
class FourOfAKind(HandCategory):
    hand_type: ClassVar[HandType] = HandType.FOUR_OF_A_KIND
    quad: CardGroup
    kicker: Card

    def tiebreak(self) -> Tuple[int, ...]:
        return (_group_rank(self.quad), int(self.kicker.rank))

    def describe(self) -> str:
        return f"Four of a Kind, {_rank_name_plural(self.quad[0].rank)}"


@dataclass(frozen=True, eq=False)
class FullHouse(HandCategory):
    hand_type: ClassVar[HandType] = HandType.FULL_HOUSE
    triplet: CardGroup
    pair: CardGroup

    def tiebreak(self) -> Tuple[int, ...]:
        return (_group_rank(self.triplet), _group_rank(self.pair))

    def describe(self) -> str:
        return (
            f"Full House, {_rank_name_plural(self.triplet[0].rank)} "
            f"over {_rank_name_plural(self.pair[0].rank)}"
        )


@dataclass(frozen=True, eq=False)
class Flush(HandCategory):
    hand_type: ClassVar[HandType] = HandType.FLUSH
    cards: CardGroup

    def tiebreak(self) -> Tuple[int, ...]:
        return _descending(self.cards)

    def describe(self) -> str:
        return f"Flush, {_rank_name(max(self.cards).rank)} high"


@dataclass(frozen=True, eq=False)
class Straight(HandCategory):
    """Five cards in sequence. A wheel carries its ace as ``Rank.LOW_ACE``."""

    hand_type: ClassVar[HandType] = HandType.STRAIGHT
    cards: CardGroup

    def tiebreak(self) -> Tuple[int, ...]:
        return _descending(self.cards)

    def describe(self) -> str:
        top = max(self.cards).rank
        if top == Rank.FIVE:
            return "Straight, 5 high (Wheel)"
        return f"Straight, {_rank_name(top)} high"


@dataclass(frozen=True, eq=False)
class ThreeOfAKind(HandCategory):
    hand_type: ClassVar[HandType] = HandType.THREE_OF_A_KIND
    triplet: CardGroup
    kickers: CardGroup

    def tiebreak(self) -> Tuple[int, ...]:
        return (_group_rank(self.triplet),) + _descending(self.kickers)

    def describe(self) -> str:
        return f"Three of a Kind, {_rank_name_plural(self.triplet[0].rank)}"


@dataclass(frozen=True, eq=False)
class TwoPair(HandCategory):
    hand_type: ClassVar[HandType] = HandType.TWO_PAIR
    high_pair: CardGroup
    low_pair: CardGroup
    kicker: Card

    def tiebreak(self) -> Tuple[int, ...]:
        return (_group_rank(self.high_pair), _group_rank(self.low_pair), int(self.kicker.rank))

    def describe(self) -> str:
        return (
            f"Two Pair, {_rank_name_plural(self.high_pair[0].rank)} "
            f"and {_rank_name_plural(self.low_pair[0].rank)}"
        )


@dataclass(frozen=True, eq=False)
class OnePair(HandCategory):
    hand_type: ClassVar[HandType] = HandType.ONE_PAIR
    pair: CardGroup
    kickers: CardGroup

    def tiebreak(self) -> Tuple[int, ...]:
        return (_group_rank(self.pair),) + _descending(self.kickers)

    def describe(self) -> str:
        return f"Pair of {_rank_name_plural(self.pair[0].rank)}"


@dataclass(frozen=True, eq=False)
class HighCard(HandCategory):
    hand_type: ClassVar[HandType] = HandType.HIGH_CARD
    cards: CardGroup

    def tiebreak(self) -> Tuple[int, ...]:
        return _descending(self.cards)

    def describe(self) -> str:
        return f"High Card, {_rank_name(max(self.cards).rank)}"


def n_of_a_kind(cards: Sequence[Card], n: int) -> Optional[Tuple[CardGroup, CardGroup]]:
    """Find n cards sharing a rank.

    Args:
        cards: Cards to search
        n: Group size

    Returns:
        (group, remaining cards) for the first matching combination, or None.
        The remaining cards are the physical complement of the group, so
        same-rank cards outside the group are kept.
    """
    for indices in itertools.combinations(range(len(cards)), n):
        group = tuple(cards[i] for i in indices)
        if same_rank(group):
            rest = tuple(card for i, card in enumerate(cards) if i not in indices)
            return group, rest
    return None


def find_straight(cards: Sequence[Card]) -> Optional[CardGroup]:
    """Return the cards sorted into a run of consecutive ranks, or None.

    Aces play high first. If that fails and the hand holds an ace, every ace
    is lowered and the run is checked exactly once more: no straight can use
    a high and a low ace at the same time.
    """
    if not cards:
        return None

    ranked = sorted(cards)
    if are_consecutive([card.rank for card in ranked]):
        return tuple(ranked)

    if any(card.rank == Rank.ACE for card in cards):
        ranked = sorted(lower_aces(list(cards)))
        if are_consecutive([card.rank for card in ranked]):
            return tuple(ranked)

    return None


def _straight_flush(cards: CardGroup) -> Optional[CardGroup]:
    if not same_suit(cards):
        return None
    return find_straight(cards)


def _full_house(cards: CardGroup) -> Optional[Tuple[CardGroup, CardGroup]]:
    found = n_of_a_kind(cards, 3)
    if found is None:
        return None
    triplet, rest = found
    if not same_rank(rest):
        return None
    return triplet, rest


def _two_pair(cards: CardGroup) -> Optional[Tuple[CardGroup, CardGroup, Card]]:
    first = n_of_a_kind(cards, 2)
    if first is None:
        return None
    pair_1, rest = first
    second = n_of_a_kind(rest, 2)
    if second is None:
        return None
    pair_2, rest = second
    if _group_rank(pair_1) >= _group_rank(pair_2):
        return pair_1, pair_2, rest[0]
    return pair_2, pair_1, rest[0]


def classify(cards: Sequence[Card]) -> HandCategory:
    """Determine the category of a five-card hand.

    Categories are tried strongest first, since a stronger hand also
    satisfies the tests for some weaker ones.

    Raises:
        InvalidCardFormat: If the hand does not hold exactly five cards
    """
    if len(cards) != HAND_SIZE:
        raise InvalidCardFormat(f"A hand needs exactly {HAND_SIZE} cards, got {len(cards)}")

    ordered = tuple(sort_cards(list(cards)))

    run = _straight_flush(ordered)
    if run is not None:
        return StraightFlush(cards=run)

    quad = n_of_a_kind(ordered, 4)
    if quad is not None:
        return FourOfAKind(quad=quad[0], kicker=quad[1][0])

    full_house = _full_house(ordered)
    if full_house is not None:
        return FullHouse(triplet=full_house[0], pair=full_house[1])

    if same_suit(ordered):
        return Flush(cards=ordered)

    run = find_straight(ordered)
    if run is not None:
        return Straight(cards=run)

    trips = n_of_a_kind(ordered, 3)
    if trips is not None:
        return ThreeOfAKind(triplet=trips[0], kickers=trips[1])

    two_pair = _two_pair(ordered)
    if two_pair is not None:
        return TwoPair(high_pair=two_pair[0], low_pair=two_pair[1], kicker=two_pair[2])

    pair = n_of_a_kind(ordered, 2)
    if pair is not None:
        return OnePair(pair=pair[0], kickers=pair[1])

    return HighCard(cards=ordered)


@total_ordering
@dataclass(frozen=True, eq=False)
class Hand:
    """A classified five-card hand.

    Attributes:
        source_text: The text the hand was parsed from, kept verbatim
        cards: The five cards in input order
        category: Category variant with its tie-break groups, computed once
    """

    source_text: str
    cards: CardGroup
    category: HandCategory = field(init=False)

    def __post_init__(self):
        if len(self.cards) != HAND_SIZE:
            raise InvalidCardFormat(
                f"'{self.source_text}' must contain exactly {HAND_SIZE} cards, got {len(self.cards)}"
            )
        if len({card.identity for card in self.cards}) != HAND_SIZE:
            raise InvalidCardFormat(f"'{self.source_text}' names the same card more than once")
        object.__setattr__(self, "category", classify(self.cards))

    def __eq__(self, other):
        if not isinstance(other, Hand):
            return NotImplemented
        return self.category == other.category

    def __lt__(self, other):
        if not isinstance(other, Hand):
            return NotImplemented
        return self.category < other.category

    def __hash__(self) -> int:
        return hash(self.category)

    def __len__(self) -> int:
        return len(self.cards)

    def __str__(self) -> str:
        cards_str = " ".join(str(c) for c in self.cards)
        return f"{self.hand_type.name}({cards_str})"

    @property
    def hand_type(self) -> HandType:
        return self.category.hand_type

    def describe(self) -> str:
        return self.category.describe()


def parse_hand(text: str) -> Hand:
    """Parse a hand from a string like "4H 5H 2H 3H AH".

    Args:
        text: Exactly five whitespace-separated card tokens

    Returns:
        Classified Hand keeping ``text`` as its source

    Raises:
        InvalidCardFormat: On a malformed token, a wrong card count, or a
            repeated card
    """
    hand = Hand(source_text=text, cards=tuple(make_cards_from_string(text)))
    logger.debug("Classified %r as %s", text, hand.describe())
    return hand


def is_valid_hand(text: str) -> bool:
    """Check if a string parses as a five-card hand."""
    try:
        parse_hand(text)
    except InvalidCardFormat:
        return False
    return True


def compare_hands(hand1: Hand, hand2: Hand) -> int:
    """Compare two hands.

    Returns:
        Positive if hand1 > hand2
        Negative if hand1 < hand2
        Zero if the hands tie
    """
    key1 = hand1.category.sort_key()
    key2 = hand2.category.sort_key()
    return (key1 > key2) - (key1 < key2)


def can_beat(hand1: Hand, hand2: Hand) -> bool:
    """Check if hand1 strictly beats hand2."""
    return hand1 > hand2
