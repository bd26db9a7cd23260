import streamlit as st


def init_session_state():
    """session_state 是 Streamlit 的記憶體暫存機制，頁面重新整理後資料不會消失"""

    # 介面語言
    if 'language' not in st.session_state:
        st.session_state.language = 'zh'
    # 使用者貼上的全文
    if 'paper_text' not in st.session_state:
        st.session_state.paper_text = ''
    # 連結後的 Paper
    if 'linked_paper' not in st.session_state:
        st.session_state.linked_paper = None
    if 'link_done' not in st.session_state:
        st.session_state.link_done = False


def save_linked_paper(paper):
    st.session_state.linked_paper = paper
    st.session_state.link_done = True


def clear_session():
    st.session_state.paper_text = ''
    st.session_state.linked_paper = None
    st.session_state.link_done = False
