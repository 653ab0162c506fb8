# app/utils.py
import sys
import os

# Project root on sys.path so `streamlit run app/streamlit_app.py` can import analytics/storage
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

import streamlit as st
import pandas as pd
from contextlib import contextmanager
from storage.duck import load_dataset

SUMMARY_CSS = """
<style>
  .summary { display: grid; grid-template-columns: repeat(4, 1fr); gap: 10px; }
  .summary .stat { border-radius: 10px; padding: 10px 12px; background: rgba(128,128,128,.08); }
  .summary .name { font-size: 0.8rem; opacity: .7; }
  .summary .figure { font-size: 1.3rem; font-weight: 700; }
</style>
"""


def inject_css():
    st.markdown(SUMMARY_CSS, unsafe_allow_html=True)


def summary_panel(stats: dict[str, str]):
    """Four-field statistics readout."""
    cells = "".join(
        f'<div class="stat"><div class="name">{name}</div><div class="figure">{value}</div></div>'
        for name, value in stats.items()
    )
    st.markdown(f'<div class="summary">{cells}</div>', unsafe_allow_html=True)


@st.cache_data(show_spinner=False)
def load_records(path: str) -> pd.DataFrame:
    return load_dataset(path)


@contextmanager
def spinner(msg: str):
    with st.spinner(msg):
        yield
