"""
국가별 최고 점유율 게임 + 방사형 차트 배치.

점유율 = 게임의 국가 내 상금 / 국가 전체(모든 장르) 상금.
장르 내 비중이 아니라 국가 전체 e스포츠 상금 중 그 게임의 몫이다.
"""
import logging
import math
from collections.abc import Iterable

from analytics.aggregation import genre_lookup
from analytics.models import CountryGameRecord, CountryTopShare, GameRecord, RadialWedge

logger = logging.getLogger(__name__)

MAX_COUNTRIES = 28
INNER_RADIUS = 110.0
OUTER_RADIUS = 220.0
WEDGE_SHRINK = 0.7
LABEL_OFFSET = 26.0
SHARE_TICKS = (0.2, 0.4, 0.6, 0.8, 1.0)


def clamp_share(share: float) -> float:
    return max(0.0, min(1.0, share))


def top_shares(
    country_rows: Iterable[CountryGameRecord],
    games: Iterable[GameRecord],
    genre: str,
) -> list[CountryTopShare]:
    """
    국가마다 선택 장르 게임 중 점유율 최대 게임 하나.
    반환: country_total_earnings 내림차순
    """
    if not genre:
        return []

    genre_by_game = genre_lookup(games)
    best: dict[str, CountryTopShare] = {}

    for row in country_rows:
        if not row.country or not row.game:
            continue
        if genre_by_game.get(row.game) != genre:
            continue

        total = row.country_total_earnings
        earned = row.game_earnings_in_country
        # 0 또는 음수면 비율이 정의되지 않음
        if not (total > 0 and earned > 0):
            continue

        share = earned / total
        current = best.get(row.country)
        # 동률이면 먼저 본 행 유지
        if current is None or share > current.share:
            best[row.country] = CountryTopShare(
                country=row.country,
                country_total_earnings=total,
                top_game=row.game,
                top_game_earnings=earned,
                share=share,
            )

    result = [
        CountryTopShare(
            country=s.country,
            country_total_earnings=s.country_total_earnings,
            top_game=s.top_game,
            top_game_earnings=s.top_game_earnings,
            share=clamp_share(s.share),
        )
        for s in best.values()
    ]
    logger.debug("top_shares(%s): %d countries", genre, len(result))
    return sorted(result, key=lambda s: s.country_total_earnings, reverse=True)


def share_to_radius(share: float, inner_radius: float, outer_radius: float) -> float:
    """점유율 0 → inner, 1 → outer 선형 보간."""
    return inner_radius + clamp_share(share) * (outer_radius - inner_radius)


def share_rings(
    inner_radius: float = INNER_RADIUS,
    outer_radius: float = OUTER_RADIUS,
    ticks: tuple[float, ...] = SHARE_TICKS,
) -> list[tuple[float, float]]:
    """동심원 눈금 [(share, radius)]."""
    return [(t, share_to_radius(t, inner_radius, outer_radius)) for t in ticks]


def _label_rotation(label_angle: float) -> float:
    """라벨 회전(도). 왼쪽 반원에서는 글자가 뒤집히지 않도록 180도 돌린다."""
    rotate = math.degrees(label_angle)
    if rotate > 90 or rotate < -90:
        rotate += 180
    return rotate


def allocate_wedges(
    shares: list[CountryTopShare],
    max_countries: int = MAX_COUNTRIES,
    inner_radius: float = INNER_RADIUS,
    outer_radius: float = OUTER_RADIUS,
    shrink: float = WEDGE_SHRINK,
    label_offset: float = LABEL_OFFSET,
) -> list[RadialWedge]:
    """
    점유율 막대를 원 둘레에 배치.

    1) 국가 전체 상금 상위 max_countries 개만 사용 (가독성 제한)
    2) 점유율 내림차순, 동률은 국가 전체 상금 내림차순
    3) 원을 n 등분, 슬롯 i = [i/n, (i+1)/n) * 2π, 중심 기준 shrink 배 폭
    """
    if not shares or max_countries <= 0:
        return []

    top = sorted(shares, key=lambda s: s.country_total_earnings, reverse=True)[:max_countries]
    ordered = sorted(top, key=lambda s: (-s.share, -s.country_total_earnings))

    n = len(ordered)
    step = 2 * math.pi / n
    band = step * shrink
    label_radius = outer_radius + label_offset

    wedges = []
    for i, s in enumerate(ordered):
        slot_start = i * step
        slot_end = (i + 1) * step
        center = slot_start + step / 2
        # 라벨은 cos/sin 기준각 (0 = 3시) → 12시 기준 각에서 π/2 빼기
        label_angle = center - math.pi / 2
        wedges.append(RadialWedge(
            country=s.country,
            game=s.top_game,
            share=clamp_share(s.share),
            country_total_earnings=s.country_total_earnings,
            top_game_earnings=s.top_game_earnings,
            slot_start=slot_start,
            slot_end=slot_end,
            start_angle=center - band / 2,
            end_angle=center + band / 2,
            inner_radius=inner_radius,
            outer_radius=share_to_radius(s.share, inner_radius, outer_radius),
            label_x=math.cos(label_angle) * label_radius,
            label_y=math.sin(label_angle) * label_radius,
            label_rotation=_label_rotation(label_angle),
        ))
    return wedges
