import logging

import streamlit as st

from checker import link_paper
from models import Paper
from storage import save_linked_paper
from utils.i18n import get_text
from utils.section_detector import REFERENCES_TITLE, sections_from_paragraphs
from utils.text_processor import split_paragraphs

logger = logging.getLogger(__name__)


def build_paper(text, title=None):
    """貼上的全文 -> 段落 -> 章節 -> Paper"""
    sections = sections_from_paragraphs(split_paragraphs(text))
    return Paper(sections=tuple(sections), title=title or None)


def display_paper_input():
    """貼上全文並執行連結"""
    title = st.text_input(get_text("paper_title_label"))
    text = st.text_area(get_text("input_label"), value=st.session_state.paper_text, height=320)

    if st.button(get_text("run_link"), type="primary", use_container_width=True):
        if not text.strip():
            st.error(get_text("no_input"))
            return

        st.session_state.paper_text = text
        paper = build_paper(text, title)
        if not any(section.title == REFERENCES_TITLE for section in paper.sections):
            st.warning(get_text("no_ref_section"))

        with st.spinner("..."):
            linked = link_paper(paper)
        logger.info("Linked pasted paper with %d sections", len(paper.sections))
        save_linked_paper(linked)
