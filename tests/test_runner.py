"""
Tests for the interactive and headless game loops.
"""

from unittest import TestCase, main

import numpy as np
from numpy.random import default_rng

from game_2048.addons import GameConfiguration, Status
from game_2048.addons.types import Answer, Command
from game_2048.session import RandomInput, ScriptedInput, TurnController, play_headless, run


class RecordingSink:
    """Render sink keeping every snapshot."""

    def __init__(self):
        self.snapshots = []

    def render(self, snapshot):
        self.snapshots.append(snapshot)

    @property
    def statuses(self):
        return [snapshot.status for snapshot in self.snapshots]


class SaturatedController(TurnController):
    """Controller starting on a grid with no legal move."""

    def initialize(self, rows=None, cols=None):
        return np.array([[2, 4], [4, 2]], dtype=np.int64)


class TestRun(TestCase):
    """Test the interactive loop."""

    def test_quit_immediately(self):
        sink = RecordingSink()
        controller = TurnController(ScriptedInput([Command.QUIT]), GameConfiguration(seed=1))

        self.assertEqual(run(controller, sink), Status.INTERRUPTED)
        self.assertEqual(sink.statuses, [Status.ONGOING])
        self.assertEqual(np.count_nonzero(sink.snapshots[0].grid), 2)

    def test_invalid_move_is_rendered_again(self):
        sink = RecordingSink()
        controller = TurnController(ScriptedInput([Command.UNRECOGNIZED, Command.QUIT]), GameConfiguration(seed=1))

        self.assertEqual(run(controller, sink), Status.INTERRUPTED)
        self.assertEqual(sink.statuses, [Status.ONGOING, Status.INVALID_MOVE])

    def test_win_then_keep_playing(self):
        """After a win the player may answer no and continue."""
        sink = RecordingSink()
        config = GameConfiguration(rows=1, cols=2, target=4, seed=1)
        controller = TurnController(ScriptedInput([Command.LEFT, Command.QUIT], [Answer.NO]), config)

        self.assertEqual(run(controller, sink), Status.INTERRUPTED)
        self.assertEqual(sink.statuses, [Status.ONGOING, Status.WON, Status.ONGOING])
        np.testing.assert_array_equal(sink.snapshots[1].grid, [[4, 0]])
        self.assertEqual(sink.snapshots[1].score, 4)

    def test_win_then_stop(self):
        sink = RecordingSink()
        config = GameConfiguration(rows=1, cols=2, target=4, seed=1)
        controller = TurnController(ScriptedInput([Command.LEFT], [Answer.YES]), config)

        self.assertEqual(run(controller, sink), Status.INTERRUPTED)
        self.assertEqual(sink.statuses, [Status.ONGOING, Status.WON])

    def test_loss_is_confirmed(self):
        """A lost game is shown and asks again until the player quits."""
        sink = RecordingSink()
        controller = SaturatedController(ScriptedInput([], [Answer.NO, Answer.YES]))

        self.assertEqual(run(controller, sink), Status.INTERRUPTED)
        self.assertEqual(sink.statuses, [Status.ONGOING, Status.LOST, Status.ONGOING, Status.LOST])


class TestPlayHeadless(TestCase):
    """Test the loop without rendering."""

    def test_random_game_ends_lost(self):
        rng = default_rng(4)
        controller = TurnController(RandomInput(rng), GameConfiguration(rows=2, cols=2), rng=rng)
        score, tile = play_headless(controller)

        self.assertGreaterEqual(score, 0)
        self.assertGreaterEqual(tile, 2)
        self.assertGreater(controller.turns, 0)

    def test_max_turns(self):
        rng = default_rng(4)
        controller = TurnController(RandomInput(rng), GameConfiguration(), rng=rng)
        play_headless(controller, max_turns=3)
        self.assertLessEqual(controller.turns, 3)

    def test_quit_stops_the_game(self):
        controller = TurnController(ScriptedInput([Command.QUIT]), GameConfiguration(seed=2))
        score, tile = play_headless(controller)
        self.assertEqual(score, 0)
        self.assertEqual(tile, 2)


if __name__ == '__main__':
    main()
