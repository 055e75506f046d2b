"""Streamlit dashboard for OSCE examiner feedback."""

import plotly.graph_objects as go
import streamlit as st

from src.analytics.feedback import FeedbackEntry
from src.analytics.filters import distinct_dates, distinct_stations
from src.analytics.report import distributions_to_long_dataframe
from src.analytics.state import DashboardState, DashboardView, LoadStatus, build_view, load_snapshot
from src.api.feedback_client import FeedbackClient
from src.utils.config import (
    ALL,
    FEEDBACK_CHANNEL_TITLES,
    IMPROVEMENT_THRESHOLD,
    PROFILE_DOMAIN_MAX,
    SCORE_COLORS,
    SCORE_LEGEND,
)
from src.utils.logging_config import configure_logging

# Page configuration
st.set_page_config(
    page_title="考官回饋分析儀表板",
    page_icon="📋",
    layout="wide",
    initial_sidebar_state="expanded",
)

configure_logging()


@st.cache_data(ttl=300, show_spinner=False)
def fetch_state() -> DashboardState:
    """Fetch the feedback source once per cache period."""
    with FeedbackClient() as client:
        return load_snapshot(client)


def render_sidebar(state: DashboardState) -> tuple[str, str]:
    """Render the date and station selectors."""
    st.sidebar.title("📋 考官回饋")
    st.sidebar.markdown("---")

    selected_date = st.sidebar.selectbox(
        "選擇日期",
        options=distinct_dates(state.snapshot),
        format_func=lambda d: "全部日期" if d == ALL else d,
    )

    station_options = [str(s) for s in distinct_stations(state.snapshot)]
    selected_station = st.sidebar.selectbox(
        "選擇站號",
        options=station_options,
        format_func=lambda s: "全部站號" if s == ALL else f"第 {s} 站",
    )

    st.sidebar.markdown("---")

    if st.sidebar.button("🔄 重新整理", use_container_width=True):
        st.cache_data.clear()
        st.rerun()

    return selected_date, selected_station


def render_kpis(view: DashboardView) -> None:
    metrics = view.metrics
    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("總回饋筆數", metrics.total_count)
    with col2:
        st.metric("整體平均滿意度", f"{metrics.avg_satisfaction} / 5")
    with col3:
        st.metric(f"待改進項目 (低於{IMPROVEMENT_THRESHOLD}分)", metrics.items_to_improve)


def render_distribution(view: DashboardView) -> None:
    """Stacked horizontal bar per question, strongest agreement first."""
    st.subheader("各項指標回饋分佈")
    df = distributions_to_long_dataframe(view.distributions)
    if df.empty:
        st.info("無資料")
        return

    fig = go.Figure()
    for score, answer in SCORE_LEGEND.items():
        subset = df[df["score"] == score]
        fig.add_trace(go.Bar(
            y=subset["label"],
            x=subset["percent"],
            name=answer,
            orientation="h",
            marker={"color": SCORE_COLORS[score]},
            customdata=subset[["count", "total"]],
            hovertemplate=f"{score}分: %{{customdata[0]}}人 (%{{x:.1f}}%)<extra></extra>",
        ))

    fig.update_layout(
        barmode="stack",
        xaxis={"range": [0, 100], "title": "%"},
        yaxis={"autorange": "reversed"},
        legend={"orientation": "h", "yanchor": "bottom", "y": 1.02},
        height=450,
    )
    st.plotly_chart(fig, use_container_width=True)


def render_profile(view: DashboardView) -> None:
    st.subheader("整體滿意度雷達圖")
    if not view.profile:
        st.info("無資料")
        return

    labels = [a.axis_label for a in view.profile]
    values = [a.value for a in view.profile]
    fig = go.Figure(go.Scatterpolar(
        r=values + values[:1],
        theta=labels + labels[:1],
        fill="toself",
        name="平均分",
    ))
    fig.update_layout(
        polar={"radialaxis": {"range": [0, PROFILE_DOMAIN_MAX], "showticklabels": False}},
        showlegend=False,
        height=450,
    )
    st.plotly_chart(fig, use_container_width=True)


def render_feedback_channel(title: str, entries: tuple[FeedbackEntry, ...]) -> None:
    st.subheader(title)
    if not entries:
        st.caption("無文字回饋")
        return

    with st.container(height=500):
        for entry in entries:
            st.markdown(f"“{entry.text}”")
            st.caption(f"{entry.examiner} | 第{entry.station}站 | {entry.date}")
            st.divider()


def main():
    """Main dashboard entry point."""
    st.title("考官回饋分析儀表板")
    st.markdown("OSCE 臨床技能測驗")

    with st.spinner("正在讀取資料..."):
        state = fetch_state()

    if state.status is LoadStatus.ERROR:
        st.error(state.error)
        st.stop()

    if not state.has_data:
        st.warning("目前沒有資料")
        st.stop()

    date_filter, station_filter = render_sidebar(state)
    view = build_view(state.with_filters(date_filter, station_filter))

    st.caption(f"共 {view.metrics.total_count} 份回饋")
    render_kpis(view)
    st.markdown("---")

    col1, col2 = st.columns([2, 1])
    with col1:
        render_distribution(view)
    with col2:
        render_profile(view)

    st.markdown("---")
    col1, col2 = st.columns(2)
    with col1:
        render_feedback_channel(FEEDBACK_CHANNEL_TITLES["q9"], view.feedback.channel("q9"))
    with col2:
        render_feedback_channel(FEEDBACK_CHANNEL_TITLES["q10"], view.feedback.channel("q10"))


if __name__ == "__main__":
    main()
