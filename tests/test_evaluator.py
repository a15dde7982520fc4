"""Tests for winner selection."""

import pytest
from showdown.errors import EmptyInputError, ValidationError
from showdown.evaluator import classify_all, select_winners, winning_hands
from showdown.hand import Category, Hand


class TestWinningHands:
    def test_higher_full_house_trips(self):
        assert winning_hands(["2H 2D 2S 9C 9D", "3H 3D 3S 5C 5D"]) == ["3H 3D 3S 5C 5D"]

    def test_two_pair_kicker(self):
        assert winning_hands(["5H 5D 8S 8C KH", "5S 5C 8H 8D QC"]) == ["5H 5D 8S 8C KH"]

    def test_wheel_loses_to_six_high_straight(self):
        assert winning_hands(["AH 2D 3S 4C 5H", "2H 3D 4S 5C 6H"]) == ["2H 3D 4S 5C 6H"]

    def test_single_hand_wins(self):
        assert winning_hands(["KH AH 2D 3S 4C"]) == ["KH AH 2D 3S 4C"]

    def test_royal_flush_beats_straight_flush(self):
        assert winning_hands(["TH JH QH KH AH", "9S TS JS QS KS"]) == ["TH JH QH KH AH"]

    def test_identical_hands_tie(self):
        hands = ["AH KH QH JH TH", "AS KS QS JS TS"]
        assert winning_hands(hands) == hands

    def test_returns_same_objects(self):
        hands = ["4D 5D 6D 7D 8D", "2H 2D 2S 9C 9D"]
        result = winning_hands(hands)
        assert result[0] is hands[0]

    def test_multi_way_tie_keeps_input_order(self):
        hands = ["4S 5H 4C 8D 4H", "4D AH 3S 2D 5C", "4C AD 3H 2C 5S", "3S 4H 2S 6C 5D"]
        assert winning_hands(hands) == ["3S 4H 2S 6C 5D"]
        hands = ["3S 4S 5D 6H JH", "3H 4H 5C 6C JD", "2H 4H 5C 6C JD"]
        assert winning_hands(hands) == hands[:2]

    def test_empty_input(self):
        with pytest.raises(EmptyInputError):
            winning_hands([])

    def test_malformed_hand(self):
        with pytest.raises(ValidationError):
            winning_hands(["AH KH QH JH", "AS KS QS JS TS"])

    def test_concurrent_matches_sequential(self):
        hands = [
            "2H 2D 2S 9C 9D",
            "3H 3D 3S 5C 5D",
            "AH KH QH JH TH",
            "AS KS QS JS TS",
            "KH AH 2D 3S 4C",
        ]
        assert winning_hands(hands, max_workers=4) == winning_hands(hands)


class TestSelectWinners:
    def test_single_winner(self):
        hands = [
            Hand.from_str("AS AD 2H 5C 9S", label="Alice"),
            Hand.from_str("KS KD 2C 5H 9D", label="Bob"),
        ]
        result = select_winners(hands)

        assert not result.is_tie
        assert result.winner is not None
        assert result.winner.label == "Alice"
        assert result.best.category == Category.ONE_PAIR

    def test_tie(self):
        hands = [
            Hand.from_str("AH KH QH JH TH", label=1),
            Hand.from_str("AS KS QS JS TS", label=2),
        ]
        result = select_winners(hands)

        assert result.is_tie
        assert result.winner is None
        assert [h.label for h in result.winners] == [1, 2]

    def test_all_hands_in_input_order(self):
        hands = [
            Hand.from_str("2S 3D 5H 7C 9S", label="Alice"),
            Hand.from_str("AS AD 5H 7C 9S", label="Bob"),
            Hand.from_str("KS KD 5C 7D 9H", label="Charlie"),
        ]
        result = select_winners(hands)

        assert [h.label for h in result.all_hands] == ["Alice", "Bob", "Charlie"]
        assert [h.label for h in result.winners] == ["Bob"]

    def test_empty(self):
        with pytest.raises(EmptyInputError):
            select_winners([])

    def test_classify_all_on_pool(self):
        hands = Hand.parse_many(["2H 2D 2S 9C 9D", "4D 5D 6D 7D 8D", "AS KD 9H 5C 2S"])
        categories = [c.category for c in classify_all(hands, max_workers=3)]
        assert categories == [Category.FULL_HOUSE, Category.STRAIGHT_FLUSH, Category.HIGH_CARD]
