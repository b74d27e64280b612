"""
국가별 선수 수 vs 상금 log–log 추세선.
"""
import logging
import math
from collections.abc import Iterable

import numpy as np

from analytics.models import CountryAggregate, RegressionLine

logger = logging.getLogger(__name__)

MIN_POINTS = 3


def earnings_per_player(stat: CountryAggregate) -> float | None:
    """선수 1인당 상금. 선수 수가 0이면 None."""
    if not stat.players or stat.players <= 0:
        return None
    return stat.earnings / stat.players


def fit_log_log_trend(aggregates: Iterable[CountryAggregate]) -> RegressionLine | None:
    """
    ln(players) → ln(earnings) 최소제곱 직선.
    유효 점 3개 미만이거나 x 가 모두 같으면 None.
    """
    points = [a for a in aggregates if a.players > 0 and a.earnings > 0]
    if len(points) < MIN_POINTS:
        return None

    x = np.log([p.players for p in points])
    y = np.log([p.earnings for p in points])
    n = len(points)

    sum_x = float(x.sum())
    sum_y = float(y.sum())
    sum_xy = float((x * y).sum())
    sum_x2 = float((x * x).sum())

    denom = n * sum_x2 - sum_x * sum_x
    # 모든 x 가 같으면 부동소수 오차로 denom 이 0 이 아닐 수 있음
    if denom == 0 or np.ptp(x) == 0:
        logger.debug("fit_log_log_trend: degenerate x (all players equal)")
        return None

    m = (n * sum_xy - sum_x * sum_y) / denom
    b = (sum_y - m * sum_x) / n

    # 끝점은 반드시 적합 직선 위에서 계산
    x_log_min = math.log(min(p.players for p in points))
    x_log_max = math.log(max(p.players for p in points))
    return RegressionLine(
        slope=m,
        intercept=b,
        x_start=math.exp(x_log_min),
        y_start=math.exp(m * x_log_min + b),
        x_end=math.exp(x_log_max),
        y_end=math.exp(m * x_log_max + b),
    )
