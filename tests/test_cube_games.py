"""
Tests for cube-game record parsing and scoring.
"""

import dataclasses

import pytest

from calibration_errors import GameParseError
from calibration_models import Draw, Game
from cube_games import DEFAULT_LIMIT, parse_draw, parse_game

SAMPLE = [
    "Game 1: 3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green",
    "Game 2: 1 blue, 2 green; 3 green, 4 blue, 1 red; 1 green, 1 blue",
    "Game 3: 8 green, 6 blue, 20 red; 5 blue, 4 red, 13 green; 5 green, 1 red",
    "Game 4: 1 green, 3 red, 6 blue; 3 green, 6 red; 3 green, 15 blue, 14 red",
    "Game 5: 6 red, 1 blue, 3 green; 2 blue, 1 red, 2 green",
]


class TestParseGame:
    def test_parse_line(self):
        game = parse_game(SAMPLE[0])
        assert game.id == 1
        assert len(game.draws) == 3
        assert game.draws[0] == Draw(red=4, green=0, blue=3)

    def test_large_id(self):
        game = parse_game("Game 10: 3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green")
        assert game.id == 10

    def test_missing_colon(self):
        with pytest.raises(GameParseError):
            parse_game("Game 1 3 blue")

    def test_bad_header(self):
        with pytest.raises(GameParseError):
            parse_game("Round x: 3 blue")

    def test_unknown_colour(self):
        with pytest.raises(GameParseError, match="unknown colour"):
            parse_draw("3 purple")

    def test_bad_count(self):
        with pytest.raises(GameParseError):
            parse_draw("three blue")


class TestScoring:
    def test_minimum_power(self):
        assert parse_game(SAMPLE[0]).minimum().power() == 48

    def test_impossible_game(self):
        assert not parse_game(SAMPLE[2]).is_possible(DEFAULT_LIMIT)

    def test_possible_ids(self):
        games = [parse_game(line) for line in SAMPLE]
        assert sum(g.id for g in games if g.is_possible(DEFAULT_LIMIT)) == 8

    def test_powers(self):
        games = [parse_game(line) for line in SAMPLE]
        assert sum(g.minimum().power() for g in games) == 2286

    def test_game_without_draws(self):
        game = Game(id=7)
        assert game.is_possible(DEFAULT_LIMIT)
        assert game.minimum().power() == 0

    def test_default_limit_is_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_LIMIT.red = 99
        assert DEFAULT_LIMIT == Draw(red=12, green=13, blue=14)
