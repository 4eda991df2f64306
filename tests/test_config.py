from unittest import TestCase, main

from game_2048.addons import WINNING_TILE, ConfigurationError, GameConfiguration


class TestGameConfiguration(TestCase):
    def test_defaults(self):
        """
        The classic game: a 4x4 grid played to 2048.
        """
        config = GameConfiguration()
        self.assertEqual((config.rows, config.cols), (4, 4))
        self.assertEqual(config.target, WINNING_TILE)
        self.assertIsNone(config.seed)

    def test_invalid_dimensions(self):
        """
        Grids must have positive dimensions and room for two tiles.
        """
        for rows, cols in ((0, 4), (4, 0), (-1, 2), (1, 1)):
            with self.subTest(rows=rows, cols=cols):
                with self.assertRaises(ConfigurationError):
                    GameConfiguration(rows=rows, cols=cols)

    def test_invalid_target(self):
        """
        Targets are powers of two above the seed tile.
        """
        for target in (0, 2, 3, 100):
            with self.subTest(target=target):
                with self.assertRaises(ConfigurationError):
                    GameConfiguration(target=target)

    def test_error_is_a_value_error(self):
        with self.assertRaises(ValueError):
            GameConfiguration(rows=0)


if __name__ == '__main__':
    main()
