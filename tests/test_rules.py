import unittest

from klondike.Card import CLUBS, DIAMONDS, HEARTS, SPADES, Card
from klondike.Rules import (
    canPlaceOnFoundation,
    canPlaceOnTableau,
    findFoundationTarget,
    findTableauTarget,
    suitsAreStackable,
)


def visible(suit, rank):
    return Card(suit, rank, True)


def empty_piles(count):
    return [[] for _ in range(count)]


class RulesTestCase(unittest.TestCase):
    def test_suits_are_stackable_only_across_colours(self):
        stackable = {
            (CLUBS, DIAMONDS), (CLUBS, HEARTS), (SPADES, DIAMONDS), (SPADES, HEARTS),
            (DIAMONDS, CLUBS), (HEARTS, CLUBS), (DIAMONDS, SPADES), (HEARTS, SPADES),
        }
        for a in (CLUBS, DIAMONDS, HEARTS, SPADES):
            for b in (CLUBS, DIAMONDS, HEARTS, SPADES):
                self.assertEqual((a, b) in stackable, suitsAreStackable(a, b), (a, b))

    def test_foundation_accepts_ace_on_empty_pile_only(self):
        self.assertTrue(canPlaceOnFoundation([], visible(HEARTS, 1)))
        self.assertFalse(canPlaceOnFoundation([], visible(HEARTS, 2)))

    def test_foundation_builds_up_in_suit(self):
        pile = [visible(HEARTS, 1), visible(HEARTS, 2)]
        self.assertTrue(canPlaceOnFoundation(pile, visible(HEARTS, 3)))
        self.assertFalse(canPlaceOnFoundation(pile, visible(DIAMONDS, 3)))
        self.assertFalse(canPlaceOnFoundation(pile, visible(HEARTS, 4)))

    def test_tableau_accepts_king_on_empty_pile_only(self):
        self.assertTrue(canPlaceOnTableau([], visible(SPADES, 13)))
        self.assertFalse(canPlaceOnTableau([], visible(SPADES, 12)))

    def test_tableau_builds_down_alternating(self):
        pile = [visible(HEARTS, 6)]
        self.assertTrue(canPlaceOnTableau(pile, visible(CLUBS, 5)))
        self.assertFalse(canPlaceOnTableau(pile, visible(DIAMONDS, 5)))
        self.assertFalse(canPlaceOnTableau(pile, visible(CLUBS, 7)))

    def test_find_foundation_target_on_empty_foundations(self):
        foundations = empty_piles(4)
        self.assertEqual(0, findFoundationTarget(foundations, visible(CLUBS, 1)))
        for rank in range(2, 14):
            self.assertIsNone(findFoundationTarget(foundations, visible(CLUBS, rank)))

    def test_find_foundation_target_picks_matching_suit(self):
        foundations = [[visible(HEARTS, 1)], [visible(CLUBS, 1)], [], []]
        self.assertEqual(1, findFoundationTarget(foundations, visible(CLUBS, 2)))
        self.assertEqual(2, findFoundationTarget(foundations, visible(SPADES, 1)))

    def test_find_tableau_target_king_takes_first_empty(self):
        self.assertEqual(0, findTableauTarget(empty_piles(7), visible(DIAMONDS, 13)))
        tableau = [[visible(CLUBS, 4)], [visible(CLUBS, 9)], [], []]
        self.assertEqual(2, findTableauTarget(tableau, visible(DIAMONDS, 13)))

    def test_find_tableau_target_needs_red_six_for_five_of_clubs(self):
        five = visible(CLUBS, 5)
        self.assertIsNone(findTableauTarget([[visible(SPADES, 6)], [visible(CLUBS, 6)], []], five))
        self.assertIsNone(findTableauTarget([[visible(HEARTS, 7)]], five))
        self.assertEqual(1, findTableauTarget([[visible(SPADES, 6)], [visible(DIAMONDS, 6)]], five))
        self.assertEqual(0, findTableauTarget([[visible(HEARTS, 6)], [visible(DIAMONDS, 6)]], five))

    def test_finders_do_not_touch_piles(self):
        tableau = [[visible(HEARTS, 6)]]
        findTableauTarget(tableau, visible(CLUBS, 5))
        self.assertEqual([[visible(HEARTS, 6)]], tableau)


if __name__ == "__main__":
    unittest.main()
