"""
Shared fixtures: small game / country tables.
"""

import pytest

from analytics.models import CountryGameRecord, GameRecord


def row(country, game, total, players, earned):
    return CountryGameRecord(
        country=country,
        game=game,
        country_total_earnings=total,
        country_player_count=players,
        game_earnings_in_country=earned,
    )


@pytest.fixture
def make_row():
    return row


@pytest.fixture
def scenario_games():
    return [
        GameRecord("A", "Shooter", 100),
        GameRecord("B", "Shooter", 300),
        GameRecord("C", "MOBA", 50),
    ]


@pytest.fixture
def scenario_rows():
    return [
        row("US", "A", 500, 10, 80),
        row("US", "B", 500, 10, 300),
    ]


@pytest.fixture
def games():
    return [
        GameRecord("CS", "Shooter", 120_000_000),
        GameRecord("Valorant", "Shooter", 40_000_000),
        GameRecord("Overwatch", "Shooter", 35_000_000),
        GameRecord("Dota 2", "MOBA", 300_000_000),
        GameRecord("LoL", "MOBA", 90_000_000),
        GameRecord("Chess", "Strategy", 0),
    ]


@pytest.fixture
def country_rows():
    return [
        row("United States", "CS", 4_000_000, 900, 1_000_000),
        row("United States", "Valorant", 4_000_000, 300, 600_000),
        row("United States", "Dota 2", 4_000_000, 400, 2_000_000),
        row("China", "Dota 2", 6_000_000, 1200, 5_000_000),
        row("China", "CS", 6_000_000, 100, 120_000),
        row("Denmark", "CS", 2_000_000, 80, 1_500_000),
        row("Denmark", "Overwatch", 2_000_000, 20, 100_000),
        row("Brazil", "CS", 900_000, 250, 400_000),
        row("Brazil", "Unknown Game", 900_000, 10, 50_000),
        row("Korea", "Overwatch", 3_000_000, 60, 0),
    ]
