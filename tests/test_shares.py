"""Tests for top-game shares and radial wedge layout."""

import math

import pytest

from analytics.models import CountryTopShare, GameRecord
from analytics.shares import allocate_wedges, share_rings, share_to_radius, top_shares


def make_share(country, total, share, game="G"):
    return CountryTopShare(
        country=country,
        country_total_earnings=total,
        top_game=game,
        top_game_earnings=total * share,
        share=share,
    )


class TestTopShares:
    def test_scenario(self, scenario_games, scenario_rows):
        shares = top_shares(scenario_rows, scenario_games, "Shooter")
        assert len(shares) == 1
        s = shares[0]
        assert s.country == "US"
        assert s.country_total_earnings == 500
        assert s.top_game == "B"
        assert s.top_game_earnings == 300
        assert s.share == pytest.approx(0.6)

    def test_uses_country_total_not_genre_sum(self, games, country_rows):
        """Share is relative to the country's all-genre total."""
        shares = {s.country: s for s in top_shares(country_rows, games, "Shooter")}
        us = shares["United States"]
        assert us.country_total_earnings == 4_000_000
        assert us.top_game == "CS"
        assert us.share == pytest.approx(0.25)

    def test_zero_country_total_excluded(self, make_row):
        games = [GameRecord("X", "G", 1), GameRecord("Y", "G", 1)]
        rows = [make_row("Nowhere", "X", 0, 5, 10), make_row("Nowhere", "Y", 0, 5, 20)]
        assert top_shares(rows, games, "G") == []

    def test_zero_game_earnings_excluded(self, games, country_rows):
        countries = {s.country for s in top_shares(country_rows, games, "Shooter")}
        assert "Korea" not in countries

    def test_chosen_share_is_maximal(self, games, country_rows):
        lookup = {g.name: g.genre for g in games}
        for s in top_shares(country_rows, games, "Shooter"):
            for r in country_rows:
                if r.country != s.country or lookup.get(r.game) != "Shooter":
                    continue
                if r.country_total_earnings > 0 and r.game_earnings_in_country > 0:
                    assert r.game_earnings_in_country / r.country_total_earnings <= s.share

    def test_exact_tie_first_seen_wins(self, make_row):
        games = [GameRecord("X", "G", 1), GameRecord("Y", "G", 1)]
        rows = [make_row("US", "X", 100, 1, 40), make_row("US", "Y", 100, 1, 40)]
        assert top_shares(rows, games, "G")[0].top_game == "X"

    def test_share_clamped(self, make_row):
        games = [GameRecord("X", "G", 1)]
        rows = [make_row("US", "X", 100, 1, 250)]
        shares = top_shares(rows, games, "G")
        assert shares[0].share == 1.0

    def test_sorted_by_country_total(self, games, country_rows):
        totals = [s.country_total_earnings for s in top_shares(country_rows, games, "Shooter")]
        assert totals == sorted(totals, reverse=True)

    def test_rows_without_names_skipped(self, make_row):
        games = [GameRecord("X", "G", 1)]
        rows = [make_row("", "X", 100, 1, 10), make_row("US", "", 100, 1, 10)]
        assert top_shares(rows, games, "G") == []

    def test_empty_genre(self, games, country_rows):
        assert top_shares(country_rows, games, "") == []


class TestAllocateWedges:
    def test_slots_cover_circle(self):
        shares = [make_share(f"C{i}", 100 - i, 0.1 * (i % 7)) for i in range(9)]
        wedges = allocate_wedges(shares)
        assert len(wedges) == 9
        spans = sorted((w.slot_start, w.slot_end) for w in wedges)
        assert sum(end - start for start, end in spans) == pytest.approx(2 * math.pi)
        for (_, prev_end), (next_start, _) in zip(spans, spans[1:]):
            assert next_start == pytest.approx(prev_end)
            assert next_start >= prev_end - 1e-12

    def test_shrink_leaves_gap(self):
        wedges = allocate_wedges([make_share("A", 10, 0.5), make_share("B", 5, 0.2)], shrink=0.7)
        for w in wedges:
            assert w.end_angle - w.start_angle == pytest.approx(0.7 * math.pi)
            assert w.slot_start < w.start_angle < w.end_angle < w.slot_end
            assert w.center_angle == pytest.approx((w.slot_start + w.slot_end) / 2)

    def test_ordered_by_share_then_total(self):
        shares = [make_share("Low", 300, 0.1), make_share("TieSmall", 100, 0.5), make_share("TieBig", 200, 0.5)]
        wedges = allocate_wedges(shares)
        assert [w.country for w in wedges] == ["TieBig", "TieSmall", "Low"]

    def test_truncates_by_total_before_reordering(self):
        shares = [make_share(f"C{i}", 1000 - i, 0.01 * i) for i in range(40)]
        wedges = allocate_wedges(shares, max_countries=28)
        assert len(wedges) == 28
        assert {w.country for w in wedges} == {f"C{i}" for i in range(28)}
        assert wedges[0].country == "C27"

    def test_radius_linear_in_share(self):
        shares = [make_share("Zero", 3, 0.0), make_share("Half", 2, 0.5), make_share("Full", 1, 1.0)]
        by_country = {w.country: w for w in allocate_wedges(shares, inner_radius=100, outer_radius=200)}
        assert by_country["Zero"].outer_radius == pytest.approx(100)
        assert by_country["Half"].outer_radius == pytest.approx(150)
        assert by_country["Full"].outer_radius == pytest.approx(200)

    def test_single_slot_label_below_centre(self):
        wedges = allocate_wedges([make_share("Only", 1, 0.4)], outer_radius=220, label_offset=26)
        w = wedges[0]
        # single slot spans the whole circle, centre at 6 o'clock
        assert w.center_angle == pytest.approx(math.pi)
        assert w.label_x == pytest.approx(0, abs=1e-9)
        assert w.label_y == pytest.approx(246)

    def test_label_rotation_upright(self):
        shares = [make_share(f"C{i}", 100 - i, 0.5) for i in range(8)]
        for w in allocate_wedges(shares):
            raw = math.degrees(w.center_angle - math.pi / 2)
            if raw > 90:
                assert w.label_rotation == pytest.approx(raw + 180)
            else:
                assert w.label_rotation == pytest.approx(raw)

    def test_empty(self):
        assert allocate_wedges([]) == []
        assert allocate_wedges([make_share("A", 1, 0.5)], max_countries=0) == []


class TestShareRadius:
    def test_share_to_radius_clamps(self):
        assert share_to_radius(-0.5, 110, 220) == 110
        assert share_to_radius(2.0, 110, 220) == 220

    def test_rings(self):
        rings = share_rings(100, 200)
        assert [t for t, _ in rings] == [0.2, 0.4, 0.6, 0.8, 1.0]
        assert rings[-1][1] == pytest.approx(200)
        assert rings[0][1] == pytest.approx(120)
