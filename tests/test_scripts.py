"""
Tests for the command line scripts.
"""

from unittest import TestCase, main
from unittest.mock import patch

import evaluate
import play
from game_2048.addons import GameConfiguration, MalformedGrid


class TestPlay(TestCase):
    """Test the terminal game entry point."""

    def test_parse_arguments(self):
        args = play.parse_arguments(['--rows', '3', '--cols', '5', '--seed', '9'])
        self.assertEqual(args.config, GameConfiguration(rows=3, cols=5, seed=9))

    def test_invalid_configuration_exits(self):
        with patch('sys.stderr'):
            with self.assertRaises(SystemExit) as context:
                play.parse_arguments(['--rows', '1', '--cols', '1'])
        self.assertEqual(context.exception.code, 2)

    @patch('play.curses.wrapper')
    def test_clean_exit(self, wrapper):
        self.assertEqual(play.main(['--seed', '1']), 0)
        wrapper.assert_called_once()

    @patch('play.curses.wrapper', side_effect=KeyboardInterrupt)
    def test_keyboard_interrupt(self, _):
        self.assertEqual(play.main([]), 0)

    @patch('play.curses.wrapper', side_effect=MalformedGrid('ragged'))
    def test_malformed_grid_exit_code(self, _):
        with patch('sys.stderr'):
            self.assertEqual(play.main([]), 1)


class TestEvaluate(TestCase):
    """Test the random player evaluation."""

    def test_evaluate(self):
        frequency, mean_score = evaluate.evaluate(length=3, config=GameConfiguration(rows=2, cols=2, seed=5))
        self.assertEqual(sum(frequency.values()), 3)
        self.assertTrue(all(tile >= 2 for tile in frequency))
        self.assertGreaterEqual(mean_score, 0.0)

    def test_evaluate_is_reproducible(self):
        config = GameConfiguration(rows=2, cols=3, seed=17)
        self.assertEqual(evaluate.evaluate(length=2, config=config), evaluate.evaluate(length=2, config=config))


if __name__ == '__main__':
    main()
