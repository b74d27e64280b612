"""
게임 상금 분포: log10(상금) 히스토그램 + Epanechnikov 커널 밀도 추정.
"""
import logging
import math
from collections.abc import Iterable

import numpy as np

from analytics.models import DensityEstimate, DensityPoint, GameRecord, HistogramBin

logger = logging.getLogger(__name__)

BIN_COUNT = 20
BANDWIDTH_DIVISOR = 12
DOMAIN_PAD = 0.15           # 양쪽 여유 (decade)
FALLBACK_BANDWIDTH = 0.2
SAMPLE_COUNT = 200          # 곡선 샘플 수 (렌더링 부드러움만 결정)


def epanechnikov(u):
    """K(u) = 0.75 (1 - u²), |u| ≤ 1. 스칼라/배열 모두 가능."""
    u = np.asarray(u, dtype=float)
    k = np.where(np.abs(u) <= 1, 0.75 * (1 - u * u), 0.0)
    return float(k) if k.ndim == 0 else k


def log_earnings(games: Iterable[GameRecord]) -> np.ndarray:
    """상금이 양수인 게임의 log10(상금)."""
    values = [g.total_earnings for g in games if g.total_earnings > 0]
    return np.log10(np.asarray(values, dtype=float))


def estimate_density(
    games: Iterable[GameRecord],
    bin_count: int = BIN_COUNT,
    bandwidth_divisor: float = BANDWIDTH_DIVISOR,
    pad: float = DOMAIN_PAD,
    sample_count: int = SAMPLE_COUNT,
) -> DensityEstimate:
    """
    히스토그램과 KDE 곡선을 같은 정의역에서 계산.
    반환: DensityEstimate(bins, curve, bandwidth, domain)
    상금 양수 게임이 없으면 빈 결과.
    """
    values = log_earnings(games)
    if values.size == 0:
        return DensityEstimate()

    min_log = float(values.min())
    max_log = float(values.max())
    lo, hi = min_log - pad, max_log + pad

    # 반개구간 [a, b), 마지막 구간만 [a, b]
    counts, edges = np.histogram(values, bins=bin_count, range=(lo, hi))
    bins = [
        HistogramBin(lower_bound=float(edges[i]), upper_bound=float(edges[i + 1]), count=int(counts[i]))
        for i in range(bin_count)
    ]

    bandwidth = (max_log - min_log) / bandwidth_divisor if bandwidth_divisor > 0 else 0.0
    if not (0 < bandwidth < math.inf):
        bandwidth = FALLBACK_BANDWIDTH

    xs = lo + np.arange(sample_count) * ((hi - lo) / sample_count)
    u = (xs[:, None] - values[None, :]) / bandwidth
    density = epanechnikov(u).sum(axis=1) / (values.size * bandwidth)

    curve = [DensityPoint(x=float(x), density=float(d)) for x, d in zip(xs, density)]
    logger.debug(
        "estimate_density: n=%d, domain=[%.3f, %.3f], bandwidth=%.4f",
        values.size, lo, hi, bandwidth,
    )
    return DensityEstimate(bins=bins, curve=curve, bandwidth=bandwidth, domain=(lo, hi))


def log_decade_ticks(domain: tuple[float, float] | None, first: int = 4, last: int = 10) -> list[int]:
    """x축 눈금: 10^4 ~ 10^10 중 정의역 안에 있는 지수."""
    if domain is None:
        return []
    lo, hi = domain
    return [t for t in range(first, last + 1) if lo <= t <= hi]


def bin_money_range(b: HistogramBin) -> tuple[float, float]:
    """구간 경계를 원래 금액 단위로."""
    return math.pow(10, b.lower_bound), math.pow(10, b.upper_bound)
