import streamlit as st

# =============================================================================
# 1. 多語言字典 (app.py 與 ui/ 所有 key)
# =============================================================================
TRANSLATIONS = {
    "zh": {
        # App 介面
        "page_title": "📚 論文引用連結系統",
        "features_title": "### ✨ 功能特色",
        "feature_1": "1. ✅ **作者列表解析**：支援「名 姓」與「姓, 名」順序、et al. 縮寫與世代後綴。",
        "feature_2": "2. ✅ **內文引用擷取**：辨識 Brown (2015)、(Brown, 2015)、Brown et al. (2015) 等作者-年份引用。",
        "feature_3": "3. ✅ **引用與參考文獻連結**：依姓氏與年份比對，多筆符合時全部列出而不猜測。",
        "input_label": "請貼上論文全文（章節標題獨立一行，段落之間空一行）",
        "paper_title_label": "論文標題（選填）",
        "run_link": "開始連結",
        "no_input": "❌ 請先貼上論文內容",
        "no_ref_section": "未找到參考文獻區段（標題需為 References）",

        # 側邊欄
        "data_manage": "💾 資料管理",
        "current_status": "📊 當前暫存狀態",
        "section_count": "章節數量",
        "cite_count": "內文引用數量",
        "ref_count": "參考文獻數量",
        "clear_btn": "清空所有暫存",
        "clear_success": "已清空所有暫存資料",
        "lang_select": "選擇語言 / Select Language",

        # 結果
        "summary_title": "📊 連結結果",
        "linked_metric": "已連結",
        "ambiguous_metric": "多筆符合",
        "success_metric": "連結成功率",
        "highlight_title": "🔍 內文引用標示",
        "ref_parsing": "📖 參考文獻解析",

        # Components
        "authors": "👥 作者",
        "title": "📝 標題",
        "venue": "📖 出處",
        "publisher": "🏢 出版者",
        "pages": "📄 頁碼",
        "year": "📅 年份",
        "formatted": "🛠️ 重組格式",
        "original_text": "📍 原始參考文獻文字",
        "no_title": "未提供標題",
        "cited_by": "被引用 {count} 次",

        # 驗證
        "author_missing": "無法解析作者",
        "year_missing": "缺少年份",
        "year_format": "年份格式不正確",
        "title_missing": "缺少標題",

        # Tabs
        "tab_linked": "✅ 已連結 ({count})",
        "tab_ambiguous": "🔀 多筆符合 ({count})",
        "tab_unlinked": "❌ 找不到參考文獻 ({count})",
        "tab_unused": "⚠️ 未使用的參考文獻 ({count})",
        "linked_desc": "💡 說明：這些引用恰好對應到一筆參考文獻。",
        "ambiguous_desc": "💡 說明：這些引用同時符合多筆參考文獻，需要人工判斷。",
        "unlinked_desc": "💡 說明：這些引用在參考文獻列表中找不到作者與年份都相符的項目。",
        "unused_desc": "💡 說明：這些文獻列在參考文獻列表中，但內文從未引用。",
        "none_found": "✅ 沒有項目。",
    },
    "en": {
        # App
        "page_title": "📚 Paper Citation Linker",
        "features_title": "### ✨ Features",
        "feature_1": "1. ✅ **Author list parsing**: 'First Last' and 'Last, First' orders, et al. and generation suffixes.",
        "feature_2": "2. ✅ **In-text citation extraction**: Brown (2015), (Brown, 2015), Brown et al. (2015) and more.",
        "feature_3": "3. ✅ **Citation ↔ reference linking**: surname and year matching; multiple matches are all listed, never guessed.",
        "input_label": "Paste the paper text (headings on their own line, blank line between paragraphs)",
        "paper_title_label": "Paper title (optional)",
        "run_link": "Link citations",
        "no_input": "❌ Please paste the paper text first",
        "no_ref_section": "No reference section found (heading must be References)",

        # Sidebar
        "data_manage": "💾 Data Management",
        "current_status": "📊 Current Status",
        "section_count": "Sections",
        "cite_count": "In-Text Citations",
        "ref_count": "References",
        "clear_btn": "Clear All Data",
        "clear_success": "All session data cleared",
        "lang_select": "選擇語言 / Select Language",

        # Results
        "summary_title": "📊 Linking Results",
        "linked_metric": "Linked",
        "ambiguous_metric": "Ambiguous",
        "success_metric": "Linking Success",
        "highlight_title": "🔍 Highlighted Citations",
        "ref_parsing": "📖 Parsed References",

        # Components
        "authors": "👥 Authors",
        "title": "📝 Title",
        "venue": "📖 Venue",
        "publisher": "🏢 Publisher",
        "pages": "📄 Pages",
        "year": "📅 Year",
        "formatted": "🛠️ Formatted",
        "original_text": "📍 Original Reference Text",
        "no_title": "No Title Provided",
        "cited_by": "Cited {count} times",

        # Validation
        "author_missing": "Authors could not be parsed",
        "year_missing": "Year is missing",
        "year_format": "Year format is invalid",
        "title_missing": "Title is missing",

        # Tabs
        "tab_linked": "✅ Linked ({count})",
        "tab_ambiguous": "🔀 Ambiguous ({count})",
        "tab_unlinked": "❌ No Reference Found ({count})",
        "tab_unused": "⚠️ Unused References ({count})",
        "linked_desc": "💡 Note: These citations match exactly one reference.",
        "ambiguous_desc": "💡 Note: These citations match several references and need a manual decision.",
        "unlinked_desc": "💡 Note: No reference matches both the authors and the year of these citations.",
        "unused_desc": "💡 Note: These references are listed but never cited in the text.",
        "none_found": "✅ Nothing to show.",
    },
}


def get_text(key, **kwargs):
    """取得對應語言的文字，支援格式化字串"""
    lang = st.session_state.get('language', 'zh')
    text = TRANSLATIONS[lang].get(key, key)
    if kwargs:
        return text.format(**kwargs)
    return text
