import pytest
import streamlit as st
from streamlit.testing.v1 import AppTest

from viewer import config


@pytest.fixture
def app(tmp_path, monkeypatch):
    monkeypatch.setattr(config, "STORE_PATH", tmp_path / "datasets.json")
    monkeypatch.setenv("DATASET_VIEWER_PAGE_SIZE", "20")
    st.cache_resource.clear()
    at = AppTest.from_file("../app.py", default_timeout=30)
    at.run()
    assert not at.exception
    yield at
    st.cache_resource.clear()


def test_single_page_still_shows_pagination(app):
    captions = [c.value for c in app.caption]
    assert "Showing 1 to 8 of 8 results · Page 1 of 1" in captions
    assert any(b.label == "1" for b in app.button)


def test_rerun_clears_a_dismissed_cell_selection(app):
    session = app.session_state["viewer_session"]
    session.inspect(session.visible_rows[0], "review")
    assert session.inspector.is_open

    app.run()

    assert not app.exception
    assert not app.session_state["viewer_session"].inspector.is_open
