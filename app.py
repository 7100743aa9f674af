import logging

import streamlit as st

from config import APP_TITLE, LOG_LEVEL
from ui.form_view import render_application_form

logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO), format="%(message)s")

# --- Page settings ---
st.set_page_config(page_title=APP_TITLE, page_icon="📄")
st.title(f"📄 {APP_TITLE}")

render_application_form()
