"""
장르별 게임 목록·국가 집계 모듈.
국가×게임 행을 게임명으로 장르에 조인한 뒤 국가 단위로 합산한다.
"""
import logging
import math
from collections.abc import Iterable

from analytics.models import CountryAggregate, CountryGameRecord, GameRecord

logger = logging.getLogger(__name__)


def _or_zero(value) -> float:
    """None / NaN 은 0 으로."""
    if value is None or math.isnan(value):
        return 0.0
    return value


def genre_lookup(games: Iterable[GameRecord]) -> dict[str, str]:
    """게임명 → 장르. 같은 이름이 여러 번 나오면 마지막 값이 남는다."""
    return {g.name: g.genre for g in games}


def list_genres(games: Iterable[GameRecord]) -> list[str]:
    """장르 선택 목록 (정렬된 고유값)."""
    return sorted({g.genre for g in games})


def genre_games(games: Iterable[GameRecord], genre: str) -> list[GameRecord]:
    """장르에 속하고 상금이 있는 게임, 상금 오름차순. genre 가 비면 전체."""
    result = [
        g for g in games
        if (not genre or g.genre == genre) and g.total_earnings > 0
    ]
    return sorted(result, key=lambda g: g.total_earnings)


def leaderboard(games: Iterable[GameRecord]) -> list[GameRecord]:
    """상금 내림차순 리더보드."""
    return sorted(games, key=lambda g: g.total_earnings, reverse=True)


def aggregate_countries(
    games: list[GameRecord] | tuple[GameRecord, ...],
    country_rows: list[CountryGameRecord] | tuple[CountryGameRecord, ...],
    genre: str,
) -> list[CountryAggregate]:
    """
    선택 장르의 국가별 상금·선수 수·게임 수 합계.
    반환: earnings 내림차순 (동률은 처음 등장한 순서 유지)
    """
    if not genre or not games or not country_rows:
        return []

    genre_by_game = genre_lookup(games)

    # {country: [earnings, players, game_count]} — dict 삽입 순서 = 첫 등장 순서
    totals: dict[str, list] = {}
    for row in country_rows:
        if genre_by_game.get(row.game) != genre:
            continue
        acc = totals.setdefault(row.country, [0.0, 0.0, 0])
        acc[0] += _or_zero(row.game_earnings_in_country)
        acc[1] += _or_zero(row.country_player_count)
        acc[2] += 1

    stats = [
        CountryAggregate(country=c, earnings=e, players=p, game_count=n)
        for c, (e, p, n) in totals.items()
    ]
    logger.debug("aggregate_countries(%s): %d countries", genre, len(stats))
    # sorted(reverse=True) 는 안정 정렬
    return sorted(stats, key=lambda s: s.earnings, reverse=True)
