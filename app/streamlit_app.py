import logging

import streamlit as st

from utils import inject_css, load_records, spinner, summary_panel
from config import DATA_PATH
from chart import build_figure

from analytics.fields import Field, axis_label
from analytics.view import ViewState, compute_view
from storage.duck import DatasetLoadError

logger = logging.getLogger(__name__)

FIELD_OPTIONS = [f.value for f in Field]
SELECT_KEYS = ("xAxis", "yAxis", "colorBy")


def reset_selection():
    default = ViewState.default()
    st.session_state["xAxis"] = default.x_field.value
    st.session_state["yAxis"] = default.y_field.value
    st.session_state["colorBy"] = default.color_field.value


st.set_page_config(page_title="Health Survey Explorer", layout="wide")
inject_css()

st.title("Health Survey Explorer")
st.caption("Pick what goes on each axis and what colours the points.")

# ───────────────────────────────
# Load once
# ───────────────────────────────
try:
    with spinner("Loading survey data..."):
        data = load_records(DATA_PATH)
except DatasetLoadError as e:
    logger.exception("Error loading data")
    st.error(str(e))
    st.stop()

if any(k not in st.session_state for k in SELECT_KEYS):
    reset_selection()

# ───────────────────────────────
# Controls
# ───────────────────────────────
c1, c2, c3, c4 = st.columns([2, 2, 2, 1])
with c1:
    st.selectbox("X axis", FIELD_OPTIONS, key="xAxis", format_func=axis_label)
with c2:
    st.selectbox("Y axis", FIELD_OPTIONS, key="yAxis", format_func=axis_label)
with c3:
    st.selectbox("Color by", FIELD_OPTIONS, key="colorBy", format_func=axis_label)
with c4:
    st.button("Reset", key="resetBtn", on_click=reset_selection)

state = ViewState.from_values(*(st.session_state[k] for k in SELECT_KEYS))

# ───────────────────────────────
# Update
# ───────────────────────────────
model = compute_view(data, state, st.session_state.get("rendered_ids", ()))
st.session_state["rendered_ids"] = model.ids

st.plotly_chart(
    build_figure(model),
    config={"displayModeBar": False},
    key="scatter",
)

recon = model.reconciliation
if not recon.is_empty:
    st.caption(
        f"{len(recon.enter)} entered • {len(recon.update)} moved • {len(recon.exit)} removed"
    )

st.subheader("Summary")
summary_panel(model.stats.as_display())
