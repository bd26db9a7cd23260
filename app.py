"""
論文引用連結系統 - 主程式

streamlit run app.py
"""
import logging

import streamlit as st

from settings import get_settings
from storage import clear_session, init_session_state
from ui.comparison_ui import display_comparison_results, display_link_summary, display_references
from ui.components import display_highlighted_sections
from ui.paper_input import display_paper_input
from utils.i18n import get_text

logging.basicConfig(
    level=get_settings().log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# ==================== 頁面設定 ====================

st.set_page_config(page_title="Citation Linker", layout="wide")

# 初始化 session state
init_session_state()


# ==================== 側邊欄：資料管理 ====================

with st.sidebar:
    st.selectbox(
        get_text("lang_select"),
        options=["zh", "en"],
        format_func=lambda code: "中文" if code == "zh" else "English",
        key="language",
    )

    st.header(get_text("data_manage"))

    # 顯示當前暫存狀態
    st.subheader(get_text("current_status"))
    linked_paper = st.session_state.linked_paper
    st.metric(get_text("section_count"), len(linked_paper.sections) if linked_paper else 0)
    st.metric(get_text("cite_count"), len(linked_paper.cites) if linked_paper else 0)
    st.metric(get_text("ref_count"), len(linked_paper.references) if linked_paper else 0)

    # 清空資料
    st.markdown("---")
    if st.button(get_text("clear_btn"), type="secondary", use_container_width=True):
        clear_session()
        st.success(get_text("clear_success"))
        st.rerun()


# ==================== 標題區 ====================

st.title(get_text("page_title"))

st.markdown("\n".join([
    get_text("features_title"),
    get_text("feature_1"),
    get_text("feature_2"),
    get_text("feature_3"),
]))

st.markdown("---")


# ==================== 主區域：輸入與連結 ====================

display_paper_input()

if st.session_state.link_done and st.session_state.linked_paper is not None:
    paper = st.session_state.linked_paper

    st.markdown("---")
    display_link_summary(paper)

    st.markdown("---")
    display_highlighted_sections(paper)

    st.markdown("---")
    display_references(paper)

    st.markdown("---")
    display_comparison_results(paper)
