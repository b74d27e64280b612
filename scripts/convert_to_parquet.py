"""
상금 CSV → Parquet 변환 스크립트.

esports_games.csv / country_esports.csv 를 타입 정리 후 Parquet 로 저장합니다.
대시보드는 Parquet 파일이 있으면 CSV 대신 사용합니다.

실행:
    python scripts/convert_to_parquet.py
"""
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

import pandas as pd

from analytics.data_loader import (
    COUNTRY_COLUMNS,
    COUNTRY_CSV,
    COUNTRY_PARQUET,
    GAME_COLUMNS,
    GAMES_CSV,
    GAMES_PARQUET,
    normalize_frame,
)

TABLES = [
    (GAMES_CSV, GAMES_PARQUET, GAME_COLUMNS, ["total_earnings"]),
    (COUNTRY_CSV, COUNTRY_PARQUET, COUNTRY_COLUMNS,
     ["country_total_earnings", "country_player_count", "game_earnings_in_country"]),
]


def convert(csv_path: str, parquet_path: str, columns: dict[str, str], numeric: list[str]) -> int:
    """CSV 하나 변환. 저장한 행 수 반환 (파일 없으면 0)."""
    if not os.path.exists(csv_path):
        print(f"  [스킵] 파일 없음: {csv_path}")
        return 0

    df = pd.read_csv(csv_path, dtype=str, keep_default_na=False)
    df = normalize_frame(df, columns, numeric)
    # 원본 헤더로 되돌려 저장 (로더가 같은 매핑을 사용)
    df = df.rename(columns={v: k for k, v in columns.items()})
    df.to_parquet(parquet_path, index=False, compression="gzip")

    size_kb = os.path.getsize(parquet_path) / 1024
    print(f"  -> {os.path.basename(parquet_path)}: {len(df):,}행, {size_kb:.1f} KB")
    return len(df)


def main():
    print("CSV → Parquet 변환")
    converted = 0
    for csv_path, parquet_path, columns, numeric in TABLES:
        converted += convert(csv_path, parquet_path, columns, numeric)

    if converted == 0:
        print("변환할 데이터가 없습니다.")
        sys.exit(1)

    print("\n완료!")


if __name__ == "__main__":
    main()
