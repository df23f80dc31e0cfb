from typing import Callable, List, Tuple

import numpy as np
import pytest

from poker_hands.rules import Card, Rank, Suit
from poker_hands.utils.seeding import make_rng

DECK: List[Card] = [Card(rank=rank, suit=suit) for rank in Rank if rank != Rank.LOW_ACE for suit in Suit]


def draw_hand_texts(rng: np.random.Generator, count: int) -> List[str]:
    """Draw ``count`` hands of five distinct cards from one deck, as text."""
    picks = rng.choice(len(DECK), size=count * 5, replace=False)
    cards = [str(DECK[i]) for i in picks]
    return [" ".join(cards[i * 5 : (i + 1) * 5]) for i in range(count)]


@pytest.fixture
def deal_pair() -> Callable[[int], Tuple[str, str]]:
    """Factory dealing two random hands for a given seed."""

    def _deal(seed: int) -> Tuple[str, str]:
        first, second = draw_hand_texts(make_rng(seed), 2)
        return first, second

    return _deal
