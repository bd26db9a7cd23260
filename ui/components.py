import streamlit as st

from citation.in_text_extractor import highlight_cites
from parsers.acl.acl_parser import format_pages_display, format_reference
from parsers.names import format_names
from settings import get_settings
# 引用翻譯
from utils.i18n import get_text


def display_reference_with_details(ref, index, cited_by=0, errors=None):
    """ 統一顯示參考文獻的詳細資訊 """
    title_text = ref.title or get_text("no_title")
    icon = "⚠️ " if errors else ""

    with st.expander(f"{icon}[{index}] {title_text}", expanded=False):
        # 驗證錯誤
        for code in errors or []:
            st.warning(get_text(code))

        # 作者
        if ref.authors:
            st.markdown(f"**{get_text('authors')}**")
            st.markdown(f"　└─ {format_names(ref.authors)}")

        # 標題
        if ref.title:
            st.markdown(f"**{get_text('title')}**")
            st.markdown(f"　└─ {ref.title}")

        # 出處
        if ref.venue:
            st.markdown(f"**{get_text('venue')}**")
            st.markdown(f"　└─ {ref.venue}")

        # 出版者
        if ref.publisher:
            st.markdown(f"**{get_text('publisher')}**")
            st.markdown(f"　└─ {ref.publisher}")

        # 頁碼
        if ref.pages:
            st.markdown(f"**{get_text('pages')}**")
            st.markdown(f"　└─ {format_pages_display(ref.pages)}")

        # 年份
        if ref.year:
            st.markdown(f"**{get_text('year')}**")
            st.markdown(f"　└─ {ref.year}")

        st.caption(get_text("cited_by", count=cited_by))

        st.markdown(f"**{get_text('formatted')}**")
        st.code(format_reference(ref), language=None)

        # 原文
        st.divider()
        st.caption(get_text("original_text"))
        st.markdown(f"""
            <div style="
                background-color: #f0f2f6;
                border-left: 3px solid #1f77b4;
                padding: 12px 12px 24px 12px;
                border-radius: 4px;
                font-family: monospace;
                font-size: 14px;
                line-height: 1.6;
                white-space: pre-wrap;
                word-wrap: break-word;
            ">
            {ref.source or ''}
            </div>
            """, unsafe_allow_html=True)


def display_highlighted_sections(paper):
    """內文段落，引用以粗體標示；參考文獻章節不顯示"""
    st.subheader(get_text("highlight_title"))
    references_title = get_settings().references_title_pattern
    for section in paper.sections:
        if references_title.search(section.title.strip()):
            continue
        if section.title:
            st.markdown(f"#### {section.title}")
        for paragraph in section.paragraphs:
            st.markdown(highlight_cites(paragraph, "**:green[{}]**"))


def display_cite_item(i, cite):
    """單筆引用：原文與指向的參考文獻"""
    pointer = cite.origin.pointer if cite.origin else ""
    targets = ", ".join(cite.references) if cite.references else "—"
    st.markdown(f"{i}. **{cite.source}** `{pointer}` → {targets}")
