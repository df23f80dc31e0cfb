"""Tests for winner selection over batches of hands."""

import logging

import pytest

from poker_hands import EmptyInput, InvalidCardFormat, rank_hands, winning_hands
from poker_hands.rules import HandType


class TestWinningHands:
    def test_single_hand_always_wins(self):
        assert winning_hands(["4S 5S 7H 8D JC"]) == ["4S 5S 7H 8D JC"]

    def test_highest_card_wins(self):
        hands = ["4S 5S 6S 8D 3C", "2S 4C 7S 9H 10H", "3S 4S 5D 6H JH"]
        assert winning_hands(hands) == ["3S 4S 5D 6H JH"]

    def test_straight_beats_high_cards(self):
        hands = ["4D 5S 6S 8D 3C", "2S 4C 7S 9H 10H", "3S 4S 5D 6H 7H"]
        assert winning_hands(hands) == ["3S 4S 5D 6H 7H"]

    def test_tie_for_highest_card_returns_both(self):
        hands = ["4D 5S 6S 8D 3C", "2S 4C 7S 9H 10H", "3S 4S 5D 6H JH", "3H 4H 5C 6C JD"]
        assert winning_hands(hands) == ["3S 4S 5D 6H JH", "3H 4H 5C 6C JD"]

    def test_winners_are_the_input_objects(self):
        hands = ["2S 8H 6S 8D JH", " 4S 5H 4C 8C 5C "]
        result = winning_hands(hands)
        assert result == [" 4S 5H 4C 8C 5C "]
        assert result[0] is hands[1]

    @pytest.mark.parametrize(
        "hands, expected",
        [
            (["4S 5H 6C 8D KH", "2S 4H 6S 4D JH"], ["2S 4H 6S 4D JH"]),
            (["4S 2H 6S 2D JH", "2S 4H 6C 4D JD"], ["2S 4H 6C 4D JD"]),
            (["4H 4S AH JC 3D", "4C 4D AS 5D 6C"], ["4H 4S AH JC 3D"]),
            (["2S 8H 6S 8D JH", "4S 5H 4C 8C 5C"], ["4S 5H 4C 8C 5C"]),
            (["2S 8H 2D 8D 3H", "4S 5H 4C 8S 5D"], ["2S 8H 2D 8D 3H"]),
            (["2S QS 2C QD JH", "JD QH JS 8D QC"], ["JD QH JS 8D QC"]),
            (["JD QH JS 8D QC", "JS QS JC 2D QD"], ["JD QH JS 8D QC"]),
            (["2S 8H 2H 8D JH", "4S 5H 4C 8S 4H"], ["4S 5H 4C 8S 4H"]),
            (["2S 2H 2C 8D JH", "4S AH AS 8C AD"], ["4S AH AS 8C AD"]),
            (["4S 5H 4C 8D 4H", "10D JH QS KD AC"], ["10D JH QS KD AC"]),
            (["4S 5H 4C 8D 4H", "4D AH 3S 2D 5C"], ["4D AH 3S 2D 5C"]),
            (["2H 3C 4D 5D 6H", "4S AH 3S 2D 5H"], ["2H 3C 4D 5D 6H"]),
            (["4C 6H 7D 8D 5H", "2S 4S 5S 6S 7S"], ["2S 4S 5S 6S 7S"]),
            (["3H 6H 7H 8H 5H", "4S 5H 4C 5D 4H"], ["4S 5H 4C 5D 4H"]),
            (["4H 4S 4D 9S 9D", "5H 5S 5D 8S 8D"], ["5H 5S 5D 8S 8D"]),
            (["4S 5H 4D 5D 4H", "3S 3H 2S 3D 3C"], ["3S 3H 2S 3D 3C"]),
            (["2S 2H 2C 8D 2D", "4S 5H 5S 5D 5C"], ["4S 5H 5S 5D 5C"]),
            (["4S 5H 5S 5D 5C", "7S 8S 9S 6S 10S"], ["7S 8S 9S 6S 10S"]),
            (["4H 5H 2H 3H AH", "6H 7H 8H 9H 10H"], ["6H 7H 8H 9H 10H"]),
        ],
    )
    def test_head_to_head(self, hands, expected):
        assert winning_hands(hands) == expected

    def test_identical_full_houses_tie_in_input_order(self):
        hands = ["2S 3C 4D 5H 7S", "4H 4S 4D 9S 9D", "4C 4S 4H 9C 9H"]
        assert winning_hands(hands) == ["4H 4S 4D 9S 9D", "4C 4S 4H 9C 9H"]

    def test_different_straights_to_same_top_card_all_kept(self):
        hands = ["3S 4S 5D 6H 7H", "3H 4H 5C 6C 7D", "3S 4S 5D 6H 7H"]
        assert winning_hands(hands) == hands

    def test_empty_batch(self):
        with pytest.raises(EmptyInput):
            winning_hands([])

    def test_malformed_token(self):
        with pytest.raises(InvalidCardFormat):
            winning_hands(["4X 5H 6H 7H 8H"])

    def test_malformed_hand_anywhere_in_batch(self):
        with pytest.raises(InvalidCardFormat):
            winning_hands(["4S 5H 6C 8D KH", "2S 4H 6S 4D"])

    def test_logs_winner_count(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="poker_hands"):
            winning_hands(["4S 5H 6C 8D KH", "2S 4H 6S 4D JH"])
        assert "1 of 2 hands tie for best with Pair of 4s" in caplog.text


class TestRankHands:
    def test_sorted_best_first(self):
        ranked = rank_hands(["4S 5H 6C 8D KH", "7S 8S 9S 6S 10S", "2S 4H 6S 4D JH"])
        assert [h.hand_type for h in ranked] == [
            HandType.STRAIGHT_FLUSH,
            HandType.ONE_PAIR,
            HandType.HIGH_CARD,
        ]

    def test_ties_keep_input_order(self):
        ranked = rank_hands(["3H 4H 5C 6C 7D", "2S 2H 3D 4C 9S", "3S 4S 5D 6H 7H"])
        assert [h.source_text for h in ranked] == [
            "3H 4H 5C 6C 7D",
            "3S 4S 5D 6H 7H",
            "2S 2H 3D 4C 9S",
        ]

    def test_empty_batch(self):
        with pytest.raises(EmptyInput):
            rank_hands([])

    def test_empty_input_is_value_error(self):
        with pytest.raises(ValueError):
            rank_hands(())
