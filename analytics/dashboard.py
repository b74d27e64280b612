"""
선택 장르 하나에 대한 모든 파생 데이터 묶음.
화면 쪽은 GenreContext 를 만들어 build_genre_view() 만 호출한다.
"""
from dataclasses import dataclass, field

from analytics.aggregation import aggregate_countries, genre_games, leaderboard
from analytics.density import BANDWIDTH_DIVISOR, BIN_COUNT, estimate_density
from analytics.models import (
    CountryAggregate,
    CountryTopShare,
    DensityEstimate,
    GameRecord,
    GenreContext,
    RadialWedge,
    RegressionLine,
)
from analytics.shares import MAX_COUNTRIES, WEDGE_SHRINK, allocate_wedges, top_shares
from analytics.trend import fit_log_log_trend


@dataclass(frozen=True)
class GenreView:
    genre: str
    games: list[GameRecord] = field(default_factory=list)
    leaderboard: list[GameRecord] = field(default_factory=list)
    country_stats: list[CountryAggregate] = field(default_factory=list)
    top_shares: list[CountryTopShare] = field(default_factory=list)
    wedges: list[RadialWedge] = field(default_factory=list)
    trend: RegressionLine | None = None
    density: DensityEstimate = field(default_factory=DensityEstimate)

    @property
    def is_truncated(self) -> bool:
        """방사형 차트가 국가 수 제한에 걸렸는지."""
        return len(self.top_shares) > len(self.wedges)


def build_genre_view(
    context: GenreContext,
    max_countries: int = MAX_COUNTRIES,
    bin_count: int = BIN_COUNT,
    bandwidth_divisor: float = BANDWIDTH_DIVISOR,
    shrink: float = WEDGE_SHRINK,
) -> GenreView:
    """
    장르 선택 → 게임 목록 / 국가 집계 / 점유율 / 추세선 / 분포.
    캐시 없음: 같은 입력이면 같은 출력.
    """
    games = genre_games(context.games, context.genre)
    stats = aggregate_countries(context.games, context.country_rows, context.genre)
    shares = top_shares(context.country_rows, context.games, context.genre)

    return GenreView(
        genre=context.genre,
        games=games,
        leaderboard=leaderboard(games),
        country_stats=stats,
        top_shares=shares,
        wedges=allocate_wedges(shares, max_countries=max_countries, shrink=shrink),
        trend=fit_log_log_trend(stats),
        density=estimate_density(games, bin_count=bin_count, bandwidth_divisor=bandwidth_divisor),
    )
