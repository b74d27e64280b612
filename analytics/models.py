"""
e스포츠 상금 데이터 레코드 타입.
원본 테이블 두 개(게임별 / 국가×게임별)와 차트가 소비하는 파생 레코드.
"""
import math
from dataclasses import dataclass, field


# ── 원본 테이블 ───────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class GameRecord:
    """esports_games.csv 한 행."""
    name: str
    genre: str
    total_earnings: float


@dataclass(frozen=True)
class CountryGameRecord:
    """country_esports.csv 한 행 (국가 × 게임).

    country_total_earnings 는 장르와 무관한 해당 국가 전체 상금.
    """
    country: str
    game: str
    country_total_earnings: float
    country_player_count: float
    game_earnings_in_country: float


# ── 파생 레코드 ───────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class CountryAggregate:
    """선택 장르 기준 국가별 합계."""
    country: str
    earnings: float
    players: float
    game_count: int


@dataclass(frozen=True)
class CountryTopShare:
    """국가 전체 상금 대비 점유율이 가장 높은 게임 (선택 장르 내)."""
    country: str
    country_total_earnings: float
    top_game: str
    top_game_earnings: float
    share: float


@dataclass(frozen=True)
class RadialWedge:
    """방사형 차트의 국가 하나.

    각도는 12시 방향 0, 시계 방향 증가 (라디안).
    slot_* 는 간격 적용 전 슬롯, start/end_angle 은 간격 적용 후 막대.
    """
    country: str
    game: str
    share: float
    country_total_earnings: float
    top_game_earnings: float
    slot_start: float
    slot_end: float
    start_angle: float
    end_angle: float
    inner_radius: float
    outer_radius: float
    label_x: float
    label_y: float
    label_rotation: float

    @property
    def center_angle(self) -> float:
        return (self.start_angle + self.end_angle) / 2


@dataclass(frozen=True)
class RegressionLine:
    """log–log 회귀선. slope/intercept 는 ln 공간 값, 끝점은 원래 단위."""
    slope: float
    intercept: float
    x_start: float
    y_start: float
    x_end: float
    y_end: float

    def predict(self, players: float) -> float:
        return math.exp(self.slope * math.log(players) + self.intercept)


@dataclass(frozen=True)
class HistogramBin:
    lower_bound: float
    upper_bound: float
    count: int


@dataclass(frozen=True)
class DensityPoint:
    x: float
    density: float


@dataclass(frozen=True)
class DensityEstimate:
    """log10(상금) 히스토그램 + Epanechnikov KDE."""
    bins: list[HistogramBin] = field(default_factory=list)
    curve: list[DensityPoint] = field(default_factory=list)
    bandwidth: float = 0.0
    domain: tuple[float, float] | None = None

    @property
    def total_count(self) -> int:
        return sum(b.count for b in self.bins)


# ── 계산 컨텍스트 ─────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class GenreContext:
    """분석 함수에 넘기는 불변 입력 묶음."""
    games: tuple[GameRecord, ...]
    country_rows: tuple[CountryGameRecord, ...]
    genre: str = ""
