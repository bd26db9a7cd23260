import streamlit as st

from models import resolve_pointer
from parsers.acl.acl_parser import format_reference
from report import linking_summary, references_frame, unused_references
from ui.components import display_cite_item, display_reference_with_details
from utils.i18n import get_text
from utils.reference_validator import validate_reference


def display_link_summary(paper):
    """連結統計卡片"""
    st.subheader(get_text("summary_title"))
    summary = linking_summary(paper)

    col1, col2, col3, col4 = st.columns(4)
    with col1:
        st.metric(get_text("cite_count"), summary["cites"])
    with col2:
        st.metric(get_text("linked_metric"), summary["linked"])
    with col3:
        st.metric(get_text("ambiguous_metric"), summary["ambiguous"])
    with col4:
        st.metric(get_text("success_metric"), summary["linking_success"])


def display_references(paper):
    """參考文獻卡片，含驗證警告與被引用次數"""
    st.subheader(get_text("ref_parsing"))
    frame = references_frame(paper)
    cited_by = dict(zip(frame["index"], frame["cited_by"]))
    for index, ref in enumerate(paper.references):
        _, errors = validate_reference(ref)
        display_reference_with_details(ref, index, cited_by.get(index, 0), errors)


def _display_cite_tab(cites, description_key):
    st.caption(get_text(description_key))
    if not cites:
        st.success(get_text("none_found"))
        return
    for i, cite in enumerate(cites, 1):
        display_cite_item(i, cite)


def display_ambiguous_tab(paper, cites):
    st.caption(get_text("ambiguous_desc"))
    if not cites:
        st.success(get_text("none_found"))
        return
    for i, cite in enumerate(cites, 1):
        with st.expander(f"{i}. {cite.source}", expanded=False):
            for pointer in cite.references:
                st.write(f"`{pointer}` {format_reference(resolve_pointer(paper, pointer))}")


def display_unused_tab(paper):
    st.caption(get_text("unused_desc"))
    unused = unused_references(paper)
    if not unused:
        st.success(get_text("none_found"))
        return
    for index, ref in unused:
        st.warning(f"[{index}] {(ref.source or '')[:150]}")


def display_comparison_results(paper):
    """顯示完整的連結結果（四個 Tabs）"""
    linked = [c for c in paper.cites if c.is_linked and not c.is_ambiguous]
    ambiguous = [c for c in paper.cites if c.is_ambiguous]
    unlinked = [c for c in paper.cites if not c.is_linked]
    unused_count = len(unused_references(paper))

    tab1, tab2, tab3, tab4 = st.tabs([
        get_text("tab_linked", count=len(linked)),
        get_text("tab_ambiguous", count=len(ambiguous)),
        get_text("tab_unlinked", count=len(unlinked)),
        get_text("tab_unused", count=unused_count),
    ])

    with tab1:
        _display_cite_tab(linked, "linked_desc")
    with tab2:
        display_ambiguous_tab(paper, ambiguous)
    with tab3:
        _display_cite_tab(unlinked, "unlinked_desc")
    with tab4:
        display_unused_tab(paper)
