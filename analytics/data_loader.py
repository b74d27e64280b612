"""
e스포츠 상금 테이블 로드 모듈.
Parquet 우선, 없으면 CSV 폴백. 숫자 컬럼은 강제 변환하고 결측은 0.
"""
import logging
import os

import pandas as pd
import streamlit as st
from dotenv import load_dotenv

from analytics.models import CountryGameRecord, GameRecord

load_dotenv()

logger = logging.getLogger(__name__)

PROJECT_ROOT = os.path.dirname(os.path.dirname(__file__))
DATA_DIR = os.getenv("ESPORTS_DATA_DIR") or os.path.join(PROJECT_ROOT, "raw_data")

GAMES_CSV = os.path.join(DATA_DIR, "esports_games.csv")
COUNTRY_CSV = os.path.join(DATA_DIR, "country_esports.csv")
GAMES_PARQUET = os.path.join(DATA_DIR, "esports_games.parquet")
COUNTRY_PARQUET = os.path.join(DATA_DIR, "country_esports.parquet")

# 원본 CSV 헤더 → 레코드 필드
GAME_COLUMNS = {
    "Game": "name",
    "Genre": "genre",
    "TotalEarnings": "total_earnings",
}
COUNTRY_COLUMNS = {
    "country": "country",
    "game": "game",
    "total_earnings": "country_total_earnings",
    "player_count": "country_player_count",
    "game_earnings": "game_earnings_in_country",
}


def _read_frame(path: str) -> pd.DataFrame:
    if path.endswith(".parquet"):
        return pd.read_parquet(path)
    return pd.read_csv(path, dtype=str, keep_default_na=False)


def normalize_frame(df: pd.DataFrame, columns: dict[str, str], numeric: list[str]) -> pd.DataFrame:
    """
    헤더 이름 변경 + 타입 정리.
    숫자 변환 실패·빈 칸은 0, 문자열 컬럼은 공백 제거.
    """
    missing = [c for c in columns if c not in df.columns]
    if missing:
        raise KeyError(f"필수 컬럼 없음: {', '.join(missing)}")

    out = df[list(columns)].rename(columns=columns).copy()
    for col in out.columns:
        if col in numeric:
            out[col] = pd.to_numeric(out[col], errors="coerce").fillna(0).astype(float)
        else:
            out[col] = out[col].fillna("").astype(str).str.strip()
    return out


def read_games_table(path: str = GAMES_CSV) -> tuple[GameRecord, ...]:
    """게임별 총상금 테이블."""
    df = normalize_frame(_read_frame(path), GAME_COLUMNS, numeric=["total_earnings"])
    return tuple(GameRecord(**row) for row in df.to_dict("records"))


def read_country_table(path: str = COUNTRY_CSV) -> tuple[CountryGameRecord, ...]:
    """국가 × 게임 상금·선수 수 테이블."""
    df = normalize_frame(
        _read_frame(path),
        COUNTRY_COLUMNS,
        numeric=["country_total_earnings", "country_player_count", "game_earnings_in_country"],
    )
    return tuple(CountryGameRecord(**row) for row in df.to_dict("records"))


def _pick_source(parquet_path: str, csv_path: str) -> str | None:
    if os.path.exists(parquet_path):
        return parquet_path
    if os.path.exists(csv_path):
        return csv_path
    return None


@st.cache_data(show_spinner="상금 데이터 로딩 중...")
def load_tables(
    games_path: str | None = None,
    country_path: str | None = None,
) -> tuple[tuple[GameRecord, ...], tuple[CountryGameRecord, ...]]:
    """
    두 테이블 로드 (Streamlit 캐시).
    파일이 없으면 빈 튜플 — 화면에서 안내 메시지 처리.
    """
    games_path = games_path or _pick_source(GAMES_PARQUET, GAMES_CSV)
    country_path = country_path or _pick_source(COUNTRY_PARQUET, COUNTRY_CSV)

    games: tuple[GameRecord, ...] = ()
    rows: tuple[CountryGameRecord, ...] = ()
    if games_path and os.path.exists(games_path):
        games = read_games_table(games_path)
    else:
        logger.warning("게임 테이블 없음: %s", games_path or GAMES_CSV)
    if country_path and os.path.exists(country_path):
        rows = read_country_table(country_path)
    else:
        logger.warning("국가 테이블 없음: %s", country_path or COUNTRY_CSV)

    logger.info("loaded %d games, %d country rows", len(games), len(rows))
    return games, rows
