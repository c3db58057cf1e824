import html
import os
import time
from datetime import datetime
import requests
import streamlit as st
from docsum.services.summary_view import build_summary_view
from summaries_client import ok, pdf_iframe, upload_once

BACKEND_URL = os.getenv("BACKEND_URL", "http://backend:8000")
REGENERATE_RELOAD_DELAY = float(os.getenv("REGENERATE_RELOAD_DELAY", "3"))

st.set_page_config(page_title="PDF Summaries", layout="wide")

st.markdown(
    """
    <style>
    :root {
        --panel-2: #1b2027;
        --border: #2a323d;
        --text: #f2f4f8;
        --muted: #98a2b3;
    }
    .block-container { padding-top: 1.2rem; padding-bottom: 1rem; }
    .summary-box {
        border: 1px solid var(--border);
        padding: 14px;
        border-radius: 10px;
        background: var(--panel-2);
        color: var(--text);
        margin-bottom: 0.75rem;
    }
    .overview-introduction, .chapter-overview { font-weight: 500; }
    .overview-conclusion, .chapter-significance { font-style: italic; }
    .key-point { margin: 4px 0; }
    .importance-high { color: #f97066; }
    .importance-medium { color: #fdb022; }
    .importance-low { color: var(--muted); }
    .doc-meta { color: var(--muted); font-size: 0.9rem; }
    .pdf-frame {
        width: 100%;
        height: calc(100vh - 220px);
        border: 1px solid var(--border);
        border-radius: 10px;
        background: #fff;
    }
    </style>
    """,
    unsafe_allow_html=True,
)


def auth_headers():
    token = st.session_state.get("access_token") or os.getenv("DOCSUM_ACCESS_TOKEN", "")
    return {"Authorization": f"Bearer {token}"} if token else {}


def api_get(path, params=None):
    try:
        return requests.get(f"{BACKEND_URL}{path}", params=params, headers=auth_headers(), timeout=10)
    except requests.RequestException:
        return None


def api_post(path, files=None, json=None):
    try:
        return requests.post(f"{BACKEND_URL}{path}", files=files, json=json, headers=auth_headers(), timeout=30)
    except requests.RequestException:
        return None


def format_date(value: str) -> str:
    try:
        return datetime.fromisoformat(value).strftime("%b %d, %Y")
    except (TypeError, ValueError):
        return value or ""


def open_document(document_id) -> None:
    st.query_params["document_id"] = str(document_id)
    st.rerun()


def render_paragraphs(paragraphs, css_prefix: str) -> None:
    for paragraph in paragraphs:
        classes = " ".join([f"{css_prefix}-paragraph"] + [f"{css_prefix}-{tag}" for tag in paragraph.tags])
        st.markdown(f"<p class='{classes}'>{html.escape(paragraph.text)}</p>", unsafe_allow_html=True)


def render_key_points(points) -> None:
    items = []
    for point in points:
        css = f"key-point importance-{point.importance}" if point.importance else "key-point"
        items.append(f"<li class='{css}'>{html.escape(point.text)}</li>")
    st.markdown(f"<ul class='key-points-list'>{''.join(items)}</ul>", unsafe_allow_html=True)


def regeneration_form(document_id) -> None:
    with st.form(f"regenerate_{document_id}"):
        chapters = st.text_input("Focus chapters (comma separated)")
        topics = st.text_input("Focus topics (comma separated)")
        instructions = st.text_area("Custom instructions")
        submitted = st.form_submit_button("Regenerate summaries")
    if not submitted:
        return
    options = {
        "focusChapters": [c.strip() for c in chapters.split(",") if c.strip()],
        "focusTopics": [t.strip() for t in topics.split(",") if t.strip()],
        "customInstructions": instructions.strip(),
    }
    st.session_state["show_regenerate"] = False
    res = api_post(f"/api/summaries/{document_id}/regenerate", json=options)
    if ok(res) and res.json().get("success"):
        st.success("Summaries are being regenerated. Please check back soon.")
        # completion is not reported back; reload after a fixed delay
        time.sleep(REGENERATE_RELOAD_DELAY)
        st.rerun()
    else:
        st.error("Failed to regenerate summaries")


def regeneration_dialog(document_id) -> None:
    if hasattr(st, "dialog"):
        @st.dialog("Regenerate summaries")
        def _dialog():
            regeneration_form(document_id)
        _dialog()
    else:
        st.subheader("Regenerate summaries")
        regeneration_form(document_id)


def render_viewer(document_id) -> None:
    if st.button("Back to documents"):
        del st.query_params["document_id"]
        st.rerun()

    with st.spinner("Loading document..."):
        res = api_get(f"/api/summaries/{document_id}")
    if not ok(res):
        st.error("Failed to load document details")
        return
    data = res.json()
    document = data.get("document") or {}
    view = build_summary_view(data.get("summaries") or [])

    st.title(document.get("title") or "PDF Document")
    left, right = st.columns([2, 3])
    with left:
        header = st.columns([3, 1])
        header[0].subheader("Summaries")
        if header[1].button("Regenerate"):
            st.session_state["show_regenerate"] = True
        st.caption("Chapter-wise summaries of your document")
        if st.session_state.get("show_regenerate"):
            regeneration_dialog(document_id)

        if view.is_empty:
            st.info('No summaries available. Click "Regenerate" to create them.')
        else:
            tabs = st.tabs(["Overview", "Chapters"])
            with tabs[0]:
                st.markdown("### Document Overview")
                if view.overview_placeholder:
                    st.caption(view.overview_placeholder)
                else:
                    render_paragraphs(view.overview, "overview")
                st.markdown("### Key Points")
                if view.key_points_placeholder:
                    st.caption(view.key_points_placeholder)
                else:
                    render_key_points(view.key_points)
            with tabs[1]:
                if view.chapters_placeholder:
                    st.caption(view.chapters_placeholder)
                for chapter in view.chapters:
                    st.markdown(f"#### {chapter.title}")
                    render_paragraphs(chapter.paragraphs, "chapter")
    with right:
        st.subheader("Document Viewer")
        if document.get("fileUrl"):
            st.markdown(pdf_iframe(document["fileUrl"]), unsafe_allow_html=True)


def handle_upload(uploaded, title: str) -> None:
    with st.spinner("Uploading..."):
        document_id, error = upload_once(st.session_state, api_post, uploaded.name, uploaded.getvalue(), title)
    if error:
        st.error(error)
    elif document_id is not None:
        st.success("Document uploaded successfully. Generating summaries...")
        open_document(document_id)


def render_listing() -> None:
    st.title("PDF Summaries")
    st.subheader("Upload Document")
    st.caption("Upload a PDF to get automatic chapter-wise summaries.")
    title = st.text_input("Document Title (optional)", placeholder="e.g., Introduction to AI")
    uploaded = st.file_uploader("Upload PDF", type=["pdf"])
    if uploaded:
        handle_upload(uploaded, title)

    st.subheader("Your Uploaded Documents")
    with st.spinner("Loading documents..."):
        res = api_get("/api/summaries")
    if not ok(res):
        st.error("Failed to load your documents")
        return
    documents = res.json()
    if not documents:
        st.info("You haven't uploaded any documents yet.")
        return
    columns = st.columns(3)
    for index, doc in enumerate(documents):
        with columns[index % 3]:
            st.markdown(
                f"<div class='summary-box'><strong>{html.escape(doc['title'])}</strong>"
                f"<div class='doc-meta'>{html.escape(doc['fileName'])}</div>"
                f"<div class='doc-meta'>Uploaded on {format_date(doc['createdAt'])}</div>"
                f"<div class='doc-meta'>{round(doc['fileSize'] / 1024)} KB</div></div>",
                unsafe_allow_html=True,
            )
            if st.button("View Summaries", key=f"view_{doc['id']}"):
                open_document(doc["id"])


st.sidebar.title("PDF Summaries")
st.sidebar.text_input("Access token", type="password", key="access_token")

if not auth_headers():
    st.info("Sign in with an access token to see your documents.")
elif st.query_params.get("document_id"):
    render_viewer(st.query_params["document_id"])
else:
    render_listing()
