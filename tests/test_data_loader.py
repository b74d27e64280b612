"""Tests for CSV / Parquet loading and type coercion."""

import pandas as pd
import pytest

from analytics.data_loader import (
    GAME_COLUMNS,
    load_tables,
    normalize_frame,
    read_country_table,
    read_games_table,
)
from analytics.models import CountryGameRecord, GameRecord

GAMES_CSV_TEXT = """Game,Genre,TotalEarnings
Dota 2,MOBA,300000000
CS,Shooter,120000000.5
Broken,Shooter,
Odd,Shooter,n/a
"""

COUNTRY_CSV_TEXT = """country,total_earnings,player_count,game,game_earnings
United States,4000000,900,CS,1000000
 China ,6000000,,Dota 2,5000000
"""


@pytest.fixture
def csv_files(tmp_path):
    games_path = tmp_path / "esports_games.csv"
    country_path = tmp_path / "country_esports.csv"
    games_path.write_text(GAMES_CSV_TEXT, encoding="utf-8")
    country_path.write_text(COUNTRY_CSV_TEXT, encoding="utf-8")
    return str(games_path), str(country_path)


class TestReadTables:
    def test_games_columns_mapped(self, csv_files):
        games = read_games_table(csv_files[0])
        assert games[0] == GameRecord("Dota 2", "MOBA", 300_000_000.0)
        assert games[1].total_earnings == pytest.approx(120_000_000.5)

    def test_bad_numbers_become_zero(self, csv_files):
        games = {g.name: g for g in read_games_table(csv_files[0])}
        assert games["Broken"].total_earnings == 0
        assert games["Odd"].total_earnings == 0

    def test_country_rows(self, csv_files):
        rows = read_country_table(csv_files[1])
        assert rows[0] == CountryGameRecord("United States", "CS", 4_000_000.0, 900.0, 1_000_000.0)
        assert rows[1].country == "China"
        assert rows[1].country_player_count == 0

    def test_parquet_round_trip(self, csv_files, tmp_path):
        parquet = tmp_path / "esports_games.parquet"
        pd.read_csv(csv_files[0]).to_parquet(parquet, index=False)
        assert read_games_table(str(parquet))[0].name == "Dota 2"

    def test_missing_column(self):
        df = pd.DataFrame({"Game": ["X"], "Genre": ["Y"]})
        with pytest.raises(KeyError, match="TotalEarnings"):
            normalize_frame(df, GAME_COLUMNS, numeric=["total_earnings"])


class TestLoadTables:
    def test_explicit_paths(self, csv_files):
        games, rows = load_tables(*csv_files)
        assert len(games) == 4
        assert len(rows) == 2
        assert isinstance(games, tuple)

    def test_missing_files_give_empty_tables(self, tmp_path):
        games, rows = load_tables(str(tmp_path / "nope.csv"), str(tmp_path / "nope2.csv"))
        assert games == ()
        assert rows == ()
