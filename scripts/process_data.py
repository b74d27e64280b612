"""
장르별 파생 데이터셋을 CSV 로 내보내는 스크립트.
processed_data/<장르>/ 아래에 국가 집계, 최고 점유율, 방사형 배치,
히스토그램, KDE 곡선, 추세선을 저장합니다.
"""

import csv
import os
import re
import sys
from dataclasses import asdict
from datetime import datetime
from pathlib import Path

sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

from analytics.aggregation import list_genres
from analytics.dashboard import build_genre_view
from analytics.data_loader import load_tables
from analytics.models import GenreContext

PROJECT_ROOT = Path(__file__).parent.parent
PROCESSED_DIR = PROJECT_ROOT / "processed_data"


def genre_dirname(genre):
    """장르명을 폴더명으로 변환"""
    return re.sub(r"[^0-9A-Za-z가-힣]+", "_", genre).strip("_").lower() or "unknown"


def save_csv(rows, filepath):
    """딕셔너리 리스트를 CSV로 저장"""
    if not rows:
        print(f"  [스킵] 데이터 없음: {filepath.name}")
        return

    fieldnames = list(rows[0].keys())
    with open(filepath, "w", encoding="utf-8-sig", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames, extrasaction="ignore")
        writer.writeheader()
        for row in rows:
            writer.writerow(row)

    print(f"  -> CSV 저장: {filepath} ({len(rows)}행)")


def export_genre(games, country_rows, genre, out_dir):
    """장르 하나의 파생 데이터 저장. 저장한 파일 수 반환"""
    view = build_genre_view(GenreContext(games=games, country_rows=country_rows, genre=genre))
    out_dir.mkdir(parents=True, exist_ok=True)

    tables = {
        "country_stats.csv": [asdict(s) for s in view.country_stats],
        "top_shares.csv": [asdict(s) for s in view.top_shares],
        "radial_wedges.csv": [asdict(w) for w in view.wedges],
        "histogram.csv": [asdict(b) for b in view.density.bins],
        "kde_curve.csv": [asdict(p) for p in view.density.curve],
        "trend.csv": [asdict(view.trend)] if view.trend else [],
    }
    saved = 0
    for filename, rows in tables.items():
        save_csv(rows, out_dir / filename)
        saved += 1 if rows else 0
    return saved


def main():
    """전체 장르 처리 실행"""
    print("=" * 60)
    print("장르별 파생 데이터 내보내기 시작")
    print(f"시작 시간: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
    print("=" * 60)

    games, country_rows = load_tables()
    if not games:
        print("게임 데이터가 없습니다. raw_data/ 폴더를 확인하세요.")
        sys.exit(1)

    genres = list_genres(games)
    total_files = 0
    for genre in genres:
        print(f"\n처리: {genre}")
        total_files += export_genre(games, country_rows, genre, PROCESSED_DIR / genre_dirname(genre))

    print("\n" + "=" * 60)
    print("내보내기 완료!")
    print(f"장르 수: {len(genres)} / 파일 수: {total_files}")
    print(f"출력 경로: {PROCESSED_DIR}")
    print("=" * 60)


if __name__ == "__main__":
    main()
