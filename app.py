"""
Esports Genre Runner - Streamlit 대시보드
장르를 선택하면 게임 상금 순위, 국가별 상금 지도, 국가별 최고 점유율 게임,
선수 수 vs 상금 추세선, 상금 분포(히스토그램 + KDE)를 보여줍니다.

streamlit run app.py
"""
import sys
from pathlib import Path

# 프로젝트 루트를 path에 추가
sys.path.insert(0, str(Path(__file__).parent))

import numpy as np
import pandas as pd
import plotly.express as px
import plotly.graph_objects as go
import streamlit as st

from analytics.aggregation import list_genres
from analytics.dashboard import build_genre_view
from analytics.data_loader import DATA_DIR, load_tables
from analytics.density import bin_money_range, log_decade_ticks
from analytics.formatting import (
    format_count_tick,
    format_money_range,
    format_money_short,
    format_percent,
    format_per_player,
    format_si,
    split_label,
)
from analytics.models import GenreContext
from analytics.shares import MAX_COUNTRIES, share_rings

DARK = dict(plot_bgcolor="#0e1117", paper_bgcolor="#0e1117", font=dict(color="white"))

# ─── 페이지 설정 ──────────────────────────────────────────

st.set_page_config(
    page_title="Esports Genre Runner",
    page_icon="🏆",
    layout="wide",
)

st.title("🏆 Esports Genre Runner")
st.caption("장르별 e스포츠 상금 분석 — 게임 순위 · 국가 분포 · 점유율 · 추세 · 분포")

games, country_rows = load_tables()
if not games:
    st.error(f"게임 데이터를 찾을 수 없습니다. `{DATA_DIR}` 폴더에 esports_games.csv를 넣으세요.")
    st.stop()

genres = list_genres(games)

# ── 사이드바 ──────────────────────────────────────────────
with st.sidebar:
    st.title("🏆 장르 선택")
    selected_genre = st.selectbox("Select genre", genres, index=0 if genres else None)

    st.divider()
    max_countries = st.slider("방사형 차트 최대 국가 수", 5, 60, MAX_COUNTRIES)
    bin_count = st.slider("히스토그램 구간 수", 5, 50, 20)
    bandwidth_divisor = st.slider("KDE 대역폭 분모", 4, 30, 12)

    st.divider()
    st.info(f"게임 {len(games):,}개 · 국가×게임 {len(country_rows):,}행")

view = build_genre_view(
    GenreContext(games=games, country_rows=country_rows, genre=selected_genre or ""),
    max_countries=max_countries,
    bin_count=bin_count,
    bandwidth_divisor=bandwidth_divisor,
)

# ── 요약 KPI 카드 ─────────────────────────────────────────
c1, c2, c3, c4 = st.columns(4)
c1.metric("게임 수", f"{len(view.games):,}개")
c2.metric("총 상금", format_money_short(sum(g.total_earnings for g in view.games)))
c3.metric("참여 국가", f"{len(view.country_stats):,}개")
c4.metric("추세선 기울기", f"{view.trend.slope:.2f}" if view.trend else "-")

st.divider()

# ══════════════════════════════════════════════════════════
# 게임 목록 + 리더보드
# ══════════════════════════════════════════════════════════
col_list, col_board = st.columns([2, 3])

with col_list:
    st.subheader(f'Games in "{selected_genre}"')
    st.caption("총상금 오름차순 (러너 순서)")
    if not view.games:
        st.info("상금 기록이 있는 게임이 없습니다.")
    else:
        st.dataframe(
            pd.DataFrame([{"게임": g.name, "총상금": f"${g.total_earnings:,.0f}"} for g in view.games]),
            use_container_width=True,
            hide_index=True,
            height=420,
        )

with col_board:
    st.subheader("Earnings leaderboard")
    if view.leaderboard:
        board = view.leaderboard[::-1]
        fig_board = go.Figure(go.Bar(
            x=[g.total_earnings for g in board],
            y=[g.name for g in board],
            orientation="h",
            text=[format_money_short(g.total_earnings) for g in board],
            textposition="outside",
            marker_color="rgba(79,195,247,0.8)",
        ))
        fig_board.update_layout(height=max(300, 22 * len(board) + 60), xaxis_title="총상금 ($)", **DARK)
        st.plotly_chart(fig_board, use_container_width=True)

# ══════════════════════════════════════════════════════════
# 국가 지도 + 방사형 점유율
# ══════════════════════════════════════════════════════════
col_map, col_radial = st.columns(2)

with col_map:
    st.subheader(f'World view for "{selected_genre}"')
    if not view.country_stats:
        st.info("이 장르의 국가별 데이터가 없습니다.")
    else:
        df_map = pd.DataFrame([{
            "country": s.country,
            "earnings": s.earnings,
            "players": s.players,
            "games": s.game_count,
            "label": format_money_short(s.earnings),
        } for s in view.country_stats])
        fig_map = px.choropleth(
            df_map,
            locations="country",
            locationmode="country names",
            color="earnings",
            hover_name="country",
            hover_data={"label": True, "players": True, "games": True, "earnings": False},
            color_continuous_scale=["#fee0e0", "#f41010"],
            range_color=(0, df_map.earnings.max() or 1),
        )
        fig_map.update_layout(height=460, margin=dict(l=0, r=0, t=10, b=0), **DARK)
        st.plotly_chart(fig_map, use_container_width=True)

with col_radial:
    st.subheader("Game shares within each country")
    caption = f'장르 "{selected_genre}"에서 각 국가 전체 상금 중 최고 게임의 비율.'
    if view.is_truncated:
        caption += f" 상금 상위 {len(view.wedges)}개 국가만 표시."
    st.caption(caption)

    if not view.wedges:
        st.info("이 장르의 국가–게임 데이터가 부족합니다.")
    else:
        inner = view.wedges[0].inner_radius
        fig_radial = go.Figure(go.Barpolar(
            r=[w.outer_radius - w.inner_radius for w in view.wedges],
            base=[w.inner_radius for w in view.wedges],
            theta=[np.degrees(w.center_angle) for w in view.wedges],
            width=[np.degrees(w.end_angle - w.start_angle) for w in view.wedges],
            customdata=[[w.country, w.game, format_percent(w.share), format_money_short(w.top_game_earnings)]
                        for w in view.wedges],
            hovertemplate="<b>%{customdata[0]}</b> — <b>%{customdata[1]}</b><br>"
                          "국가 상금의 %{customdata[2]} (%{customdata[3]})<extra></extra>",
            marker_color="rgba(255,112,67,0.85)",
        ))
        rings = share_rings(inner_radius=inner)
        fig_radial.update_layout(
            polar=dict(
                bgcolor="#0e1117",
                radialaxis=dict(
                    range=[0, rings[-1][1] + 40],
                    tickvals=[r for _, r in rings],
                    ticktext=[f"{round(t * 100)}%" for t, _ in rings],
                ),
                angularaxis=dict(
                    rotation=90,
                    direction="clockwise",
                    tickmode="array",
                    tickvals=[np.degrees(w.center_angle) for w in view.wedges],
                    ticktext=["<br>".join(split_label(w.country)) for w in view.wedges],
                ),
            ),
            height=520, showlegend=False, **DARK,
        )
        st.plotly_chart(fig_radial, use_container_width=True)

st.divider()

# ══════════════════════════════════════════════════════════
# 인사이트: 산점도 + 분포
# ══════════════════════════════════════════════════════════
st.subheader(f'Earnings insights for "{selected_genre}"')
st.caption("산점도: 국가별 선수 수 vs 상금 (log–log). 히스토그램 + KDE: 게임별 상금 분포.")

col_scatter, col_kde = st.columns(2)

with col_scatter:
    st.markdown("**Country efficiency — earnings vs players**")
    points = [s for s in view.country_stats if s.players > 0 and s.earnings > 0]
    if not points:
        st.info("그릴 수 있는 국가 데이터가 없습니다.")
    else:
        fig_sc = go.Figure(go.Scatter(
            x=[s.players for s in points],
            y=[s.earnings for s in points],
            mode="markers",
            marker=dict(
                size=[12 if s.country == "China" else 8 for s in points],
                color=["#ff7043" if s.country == "China" else "#4fc3f7" for s in points],
            ),
            text=[s.country for s in points],
            customdata=[[format_money_short(s.earnings), format_per_player(s.earnings, s.players)]
                        for s in points],
            hovertemplate="<b>%{text}</b> — %{customdata[0]}, %{x:,} players (%{customdata[1]})"
                          "<extra></extra>",
            name="국가",
        ))
        if view.trend:
            fig_sc.add_trace(go.Scatter(
                x=[view.trend.x_start, view.trend.x_end],
                y=[view.trend.y_start, view.trend.y_end],
                mode="lines",
                line=dict(color="#a5d6a7", width=2, dash="dash"),
                name="추세선",
            ))
        x_ticks = [t for t in (1, 10, 100, 1000, 10000, 100000, 1000000)
                   if max(1, min(s.players for s in points) * 0.8) <= t <= max(s.players for s in points) * 1.2]
        fig_sc.update_layout(
            xaxis=dict(type="log", title="Number of players (log scale)",
                       tickvals=x_ticks, ticktext=[format_count_tick(t) for t in x_ticks]),
            yaxis=dict(type="log", title="Total earnings (log scale)"),
            height=380, legend=dict(orientation="h", y=1.12), **DARK,
        )
        st.plotly_chart(fig_sc, use_container_width=True)

with col_kde:
    st.markdown("**Earnings distribution in this genre**")
    density = view.density
    if not density.bins:
        st.info("분포를 그릴 만큼 상금 기록이 있는 게임이 없습니다.")
    else:
        fig_kde = go.Figure()
        fig_kde.add_trace(go.Bar(
            x=[(b.lower_bound + b.upper_bound) / 2 for b in density.bins],
            y=[b.count for b in density.bins],
            width=[(b.upper_bound - b.lower_bound) * 0.95 for b in density.bins],
            customdata=[format_money_range(b.lower_bound, b.upper_bound) for b in density.bins],
            hovertemplate="%{y} games<br>%{customdata}<extra></extra>",
            marker_color="rgba(14,165,233,0.6)",
            name="게임 수",
        ))
        # KDE 곡선은 보조축에 따로 스케일
        fig_kde.add_trace(go.Scatter(
            x=[p.x for p in density.curve],
            y=[p.density for p in density.curve],
            mode="lines",
            line=dict(color="#38bdf8", width=2, shape="spline"),
            yaxis="y2",
            name="KDE",
        ))
        ticks = log_decade_ticks(density.domain)
        fig_kde.update_layout(
            xaxis=dict(title="Game total earnings (log scale)", range=list(density.domain),
                       tickvals=ticks, ticktext=[f"${format_si(10 ** t)}" for t in ticks]),
            yaxis=dict(title="Density / number of games"),
            yaxis2=dict(overlaying="y", side="right", showticklabels=False, rangemode="tozero"),
            height=380, bargap=0, legend=dict(orientation="h", y=1.12), **DARK,
        )
        st.plotly_chart(fig_kde, use_container_width=True)

        with st.expander("구간별 게임 수"):
            st.dataframe(
                pd.DataFrame([{
                    "구간": format_money_range(b.lower_bound, b.upper_bound),
                    "하한($)": f"{bin_money_range(b)[0]:,.0f}",
                    "게임 수": b.count,
                } for b in density.bins if b.count]),
                use_container_width=True,
                hide_index=True,
            )
