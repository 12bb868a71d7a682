import logging
from contextlib import contextmanager
from typing import Optional

import streamlit as st

from viewer import config
from viewer.columns import display_label
from viewer.filters import DEFAULT_PRICE_RANGE, MAX_PRICE, filter_count, filter_datasets, normalize_filters
from viewer.frame import display_frame, export_csv
from viewer.leaderboard import RandomScoreProvider, build_leaderboard, leaderboard_chart, leaderboard_frame
from viewer.pagination import ELLIPSIS
from viewer.seed import default_products
from viewer.session import Notification, ViewerSession
from viewer.store import DatasetRepository, JsonFileKeyValueStore

config.configure_logging()
logger = logging.getLogger(__name__)


# ---------- UI / layout helpers ----------
def inject_base_styles():
    if st.session_state.get("_base_css_injected"):
        return
    st.markdown(
        """
        <style>
        .app-top-bar {padding: 6px 0 4px;border-bottom: 1px solid #e5e7eb;margin-bottom: 10px;}
        .app-top-bar .breadcrumb {color: #6b7280;font-size: 0.9rem;margin-bottom: 2px;}
        .app-top-bar .page-title {font-size: 1.4rem;font-weight: 700;color: #111827;}
        .card {border: 1px solid #e5e7eb;border-radius: 12px;padding: 16px;background: #ffffff;
               box-shadow: 0 1px 2px rgba(0,0,0,0.04); margin-bottom: 12px;}
        .card-header {display: flex;justify-content: space-between;align-items: center;margin-bottom: 8px;}
        .card-title {font-weight: 600;font-size: 1.0rem;color: #111827;}
        .chip-row {display: flex;flex-wrap: wrap;gap: 6px;margin-top: 6px;}
        .chip {background: #f3f4f6;border: 1px solid #e5e7eb;border-radius: 14px;padding: 4px 10px;font-size: 0.85rem;color: #374151;}
        </style>
        """,
        unsafe_allow_html=True,
    )
    st.session_state["_base_css_injected"] = True


@contextmanager
def card(title: str):
    container = st.container()
    container.markdown(
        f"""
        <div class="card">
          <div class="card-header"><div class="card-title">{title}</div></div>
        """,
        unsafe_allow_html=True,
    )
    body = container.container()
    with body:
        yield body
    container.markdown("</div>", unsafe_allow_html=True)


def render_page_header(title: str, breadcrumb: str, chips: list, export_rows: Optional[list] = None, export_name: str = "export.csv"):
    inject_base_styles()
    c1, c2 = st.columns([8, 2])
    with c1:
        st.markdown(
            f"<div class='app-top-bar'><div class='breadcrumb'>{breadcrumb}</div><div class='page-title'>{title}</div></div>",
            unsafe_allow_html=True,
        )
    with c2:
        if export_rows:
            st.download_button(
                "Export CSV",
                data=export_csv(export_rows),
                file_name=export_name,
                mime="text/csv",
            )
    st.markdown("<div class='chip-row'>" + "".join(f"<span class='chip'>{c}</span>" for c in chips) + "</div>", unsafe_allow_html=True)


def show_notification(note: Notification):
    if note.is_error:
        st.toast(f"**{note.title}**: {note.description}", icon="⚠️")
    else:
        st.toast(f"**{note.title}**: {note.description}", icon="✅")


@st.cache_resource
def get_repository() -> DatasetRepository:
    return DatasetRepository(JsonFileKeyValueStore(config.STORE_PATH, quota_bytes=config.store_quota()))


def get_session(dataset_id: int) -> ViewerSession:
    session: Optional[ViewerSession] = st.session_state.get("viewer_session")
    if session is None:
        session = ViewerSession(get_repository(), dataset_id)
        st.session_state["viewer_session"] = session
    else:
        session.switch_dataset(dataset_id)
    return session


# ---------- dialogs ----------
@st.dialog("Cell content", width="large")
def cell_dialog(session: ViewerSession):
    view = session.inspector.view()
    if view is None:
        return
    st.subheader(view.title)
    st.text_area("Cell content", value=view.content, height=300, disabled=True, label_visibility="collapsed")
    st.caption(f"Character count: {view.char_count}")
    if st.button("Close", key="close_cell"):
        session.inspector.close()
        st.rerun()


@st.dialog("Delete dataset document")
def delete_dialog(session: ViewerSession):
    st.write(
        "Are you sure you want to delete the dataset document? "
        "This will affect all evaluations related to this dataset."
    )
    c1, c2 = st.columns(2)
    if c1.button("Cancel"):
        st.rerun()
    if c2.button("Delete Document", type="primary", disabled=session.is_deleting):
        with st.spinner("Deleting..."):
            note = session.delete_content()
        st.session_state["_pending_note"] = note
        st.rerun()


# ---------- pages ----------
def render_upload(session: ViewerSession, key: str):
    uploaded = st.file_uploader("Upload a CSV or JSONL file to view your dataset contents", type=list(config.ALLOWED_EXTENSIONS), key=key)
    if uploaded is None:
        return
    marker = (session.dataset.id, uploaded.file_id)
    if st.session_state.get("_last_upload") == marker:
        return
    st.session_state["_last_upload"] = marker
    with st.spinner("Processing..."):
        note = session.upload_bytes(uploaded.name, uploaded.getvalue())
    st.session_state["_pending_note"] = note
    st.rerun()


def render_pagination(session: ViewerSession):
    if session.is_empty:
        return
    st.caption(f"{session.page_range.label()} · Page {session.current_page} of {session.total_pages}")
    buttons = session.page_buttons
    cols = st.columns(len(buttons) + 2)
    if cols[0].button("Previous", disabled=not session.can_go_previous, key="page_prev"):
        session.previous_page()
        st.rerun()
    for i, token in enumerate(buttons, start=1):
        if token == ELLIPSIS:
            cols[i].markdown(ELLIPSIS)
            continue
        kind = "primary" if token == session.current_page else "secondary"
        if cols[i].button(str(token), key=f"page_{i}_{token}", type=kind):
            session.go_to(int(token))
            st.rerun()
    if cols[-1].button("Next", disabled=not session.can_go_next, key="page_next"):
        session.next_page()
        st.rerun()


def render_width_controls(session: ViewerSession):
    with st.expander("Column widths", expanded=False):
        c1, c2, c3 = st.columns([4, 4, 2])
        column = c1.selectbox("Column", session.columns, format_func=display_label, key="resize_column")
        offset = c2.number_input("Drag by (px)", value=0, step=10, key="resize_offset")
        if c3.button("Apply", key="resize_apply") and column:
            width = session.resize.drag(column, 0, offset)
            logger.debug("Resized %s to %spx", column, width)
            st.rerun()


def render_table(session: ViewerSession):
    columns = session.columns
    frame = display_frame(session.visible_rows, columns)
    column_config = {
        display_label(c): st.column_config.TextColumn(display_label(c), width=session.widths.get(c))
        for c in columns
    }
    st.dataframe(frame, hide_index=True, use_container_width=False, column_config=column_config)

    with st.expander("Inspect a cell", expanded=False):
        c1, c2, c3 = st.columns([4, 4, 2])
        visible = session.visible_rows
        index = c1.selectbox("Row", list(range(len(visible))), format_func=lambda i: f"id {visible[i].get('id')}", key="inspect_row")
        column = c2.selectbox("Column", columns, format_func=display_label, key="inspect_column")
        if c3.button("Inspect", key="inspect_open"):
            if index is not None and column:
                session.inspect(visible[index], column)
                cell_dialog(session)


def render_content_tab(session: ViewerSession):
    if session.is_empty:
        with card("Dataset content"):
            render_upload(session, key=f"upload_empty_{session.dataset.id}")
        return

    with card("Dataset content"):
        c1, c2 = st.columns([8, 2])
        with c1:
            render_upload(session, key=f"upload_{session.dataset.id}")
        with c2:
            if st.button("Delete content", key="delete_open"):
                delete_dialog(session)
        render_width_controls(session)
        render_table(session)
        render_pagination(session)


def render_leaderboard_tab(session: ViewerSession):
    seed = st.number_input("Seed", value=0, step=1, help="Scores are mock values drawn from this seed.")
    entries = build_leaderboard(default_products(), session.dataset, RandomScoreProvider(int(seed)))
    with card("Leaderboard"):
        st.dataframe(leaderboard_frame(entries), hide_index=True, use_container_width=True)
        st.altair_chart(leaderboard_chart(entries), use_container_width=True)


# ---------- UI setup ----------
st.set_page_config(page_title="Dataset Viewer", layout="wide")
inject_base_styles()

repo = get_repository()
datasets = repo.list_datasets()
if not datasets:
    st.error("No datasets found in the store.")
    st.stop()

with st.sidebar:
    st.markdown("### Datasets")
    search_term = st.text_input("Search", "")
    formats = st.multiselect("Format", sorted({d.format for d in datasets if d.format}))
    sizes = st.multiselect("Size", sorted({d.size for d in datasets if d.size}))
    price_range = st.slider("Price", 0.0, MAX_PRICE, DEFAULT_PRICE_RANGE, step=10.0)
    filters = normalize_filters({
        "search_term": search_term,
        "format": formats,
        "size": sizes,
        "price_range": price_range,
    })
    matched = filter_datasets(datasets, filters)
    st.caption(f"{len(matched)} of {len(datasets)} datasets · {filter_count(filters)} filters active")
    if not matched:
        st.warning("No datasets match the selected filters.")
        st.stop()
    names = {d.id: d.name for d in matched}
    choice = st.radio("Dataset", list(names), format_func=names.get)

session = get_session(choice)
# a dismissed dialog does not report back, so every run starts with no selected cell
session.inspector.close()
pending = st.session_state.pop("_pending_note", None)
if pending is not None:
    show_notification(pending)

render_page_header(
    session.dataset.name,
    "Datasets",
    [f"Format: {session.dataset.format}", f"Updated: {session.dataset.updated}", f"Rows: {len(session.rows)}"],
    export_rows=session.rows,
    export_name=f"dataset-{session.dataset.id}.csv",
)
st.caption(session.dataset.description)

content_tab, leaderboard_tab = st.tabs(["Dataset content", "Leaderboard"])
with content_tab:
    render_content_tab(session)
with leaderboard_tab:
    render_leaderboard_tab(session)
