"""
금액·비율 표시용 포맷 함수.
"""
import math

_SI_PREFIXES = ["y", "z", "a", "f", "p", "µ", "m", "", "k", "M", "G", "T", "P", "E", "Z", "Y"]


def format_money_short(value) -> str:
    """$1.2B / $3.4M / $5.6K / $78."""
    if not value or value <= 0:
        return "$0"
    if value >= 1_000_000_000:
        return f"${value / 1_000_000_000:.1f}B"
    if value >= 1_000_000:
        return f"${value / 1_000_000:.1f}M"
    if value >= 1_000:
        return f"${value / 1_000:.1f}K"
    return f"${value:.0f}"


def format_percent(share: float) -> str:
    return f"{share * 100:.1f}%"


def format_per_player(earnings: float, players: float) -> str:
    """선수 1인당 상금 문자열. 선수 수가 없으면 N/A."""
    if not players or players <= 0:
        return "N/A"
    v = earnings / players
    if v >= 1_000_000:
        return f"${v / 1_000_000:.1f}M / player"
    if v >= 1_000:
        return f"${v / 1_000:.1f}K / player"
    return f"${v:.0f} / player"


def format_si(value: float, precision: int = 6) -> str:
    """
    SI 접두어 표기 (10k, 2.3M, 1G).
    유효숫자 precision 자리로 반올림 후 끝자리 0 제거.
    """
    if value == 0 or not math.isfinite(value):
        return "0" if value == 0 else str(value)

    rounded = float(f"{value:.{precision - 1}e}")
    exponent = int(math.floor(math.log10(abs(rounded)) / 3)) * 3
    exponent = max(-24, min(24, exponent))
    scaled = rounded / 10 ** exponent

    digits = f"{scaled:.{precision}g}"
    if "." in digits:
        digits = digits.rstrip("0").rstrip(".")
    return digits + _SI_PREFIXES[exponent // 3 + 7]


def format_money_range(from_log: float, to_log: float) -> str:
    """log10 구간 → "$10k – $100k"."""
    return f"${format_si(10 ** from_log)} – ${format_si(10 ** to_log)}"


def format_count_tick(t: float) -> str:
    """로그 축 눈금 라벨 (1, 100, 10K, 1.0M)."""
    if t >= 1_000_000:
        return f"{t / 1_000_000:.1f}M"
    if t >= 1000:
        return f"{t / 1000:.0f}K"
    return f"{t:g}"


def split_label(name: str) -> list[str]:
    """긴 국가명을 두 줄로 (마지막 단어만 둘째 줄)."""
    parts = (name or "").split(" ")
    if len(parts) <= 1:
        return [name]
    return [" ".join(parts[:-1]), parts[-1]]
