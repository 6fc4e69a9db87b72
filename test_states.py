import unittest
import random
from collections import Counter

from adventure.states import GameState, ROOM_STATES, parse_state, random_room


class TestStates(unittest.TestCase):
    def test_only_win_and_game_over_are_terminal(self):
        terminal = {state for state in GameState if state.is_terminal}
        self.assertEqual(terminal, {GameState.WIN, GameState.GAME_OVER})

    def test_parse_state(self):
        self.assertEqual(parse_state("purchase"), GameState.PURCHASE)
        self.assertEqual(parse_state(" Room2 "), GameState.ROOM2)
        self.assertEqual(parse_state("game_over"), GameState.GAME_OVER)

    def test_parse_unknown_state(self):
        with self.assertRaises(ValueError) as ctx:
            parse_state("cellar")
        self.assertIn("purchase", str(ctx.exception))

    def test_random_room_covers_every_room(self):
        rng = random.Random(3)
        counts = Counter(random_room(rng) for _ in range(3000))
        self.assertEqual(set(counts), set(ROOM_STATES))
        for room in ROOM_STATES:
            self.assertGreater(counts[room], 800)


if __name__ == '__main__':
    unittest.main()
