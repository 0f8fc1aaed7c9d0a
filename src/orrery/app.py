"""Orrery Clock — Streamlit page showing body-relative time for a chosen body."""

import datetime
import html

import pytz
import streamlit as st
from pytz.exceptions import InvalidTimeError
from streamlit_js_eval import streamlit_js_eval

from orrery.bodies import BODIES
from orrery.clock import Clock, FormatError
from orrery.config import load_settings_with_fallback
from orrery.i18n import t
from orrery.models import STYLES, FormatOptions

_settings, _config_error = load_settings_with_fallback()

# --- Language detection (browser-first via streamlit-js-eval) ---
# On the first run the JS call returns None; the rerun triggered by
# streamlit_js_eval fills it in.
if "lang" not in st.session_state:
    _browser_lang: str | None = streamlit_js_eval(
        js_expressions="navigator.language", key="_lang_detect", height=0
    )
    if _browser_lang is not None:
        st.session_state.lang = "ko" if _browser_lang.lower().startswith("ko") else "en"

_lang: str = st.session_state.get("lang", "en")

st.set_page_config(
    page_title=t("page_title", _lang),
    page_icon="✦",
    layout="centered",
)

st.markdown(
    """
    <style>
    iframe[src*="streamlit_js_eval"] { display: none !important; }
    html, body, [data-testid="stAppViewContainer"], [data-testid="stMain"] {
        background-color: #0d1b35 !important;
        color: #e8e8e8;
    }
    [data-testid="stHeader"], [data-testid="stToolbar"] {
        display: none !important;
    }
    .clock-face {
        font-family: 'SFMono-Regular', Menlo, Consolas, monospace;
        font-size: 2rem;
        color: #c9a96e;
        text-align: center;
        padding: 1.2rem 0;
    }
    </style>
    """,
    unsafe_allow_html=True,
)

if _config_error:
    st.error(t("error_config", _lang).format(error=html.escape(_config_error)))

# --- Body and format controls ---
_body_keys = list(BODIES)
col1, col2, col3 = st.columns([2, 2, 2])
with col1:
    body_key = st.selectbox(
        t("label_body", _lang),
        _body_keys,
        index=_body_keys.index(_settings.body.name.lower()),
        format_func=lambda key: BODIES[key].name,
    )
with col2:
    style = st.selectbox(t("label_style", _lang), STYLES, index=STYLES.index(_settings.style))
with col3:
    longitude_text = st.text_input(
        t("label_longitude", _lang),
        value="" if _settings.longitude is None else str(_settings.longitude),
    )

try:
    longitude = float(longitude_text) if longitude_text.strip() else None
except ValueError:
    longitude = None

clock = Clock(BODIES[body_key])
options = FormatOptions(longitude=longitude)

st.caption(t("constants", _lang).format(tick=clock.tick_seconds, days=clock.days_per_year))
if clock.days_per_year < 2:
    st.caption(t("no_year", _lang))


def _clock_face(text: str) -> None:
    st.markdown(f"<div class='clock-face'>{html.escape(text)}</div>", unsafe_allow_html=True)


# --- Now ---
st.subheader(t("heading_now", _lang))
_clock_face(clock.format(clock.now(), style, options))
if st.button(t("btn_refresh", _lang)):
    st.rerun()

# --- Convert a date ---
st.subheader(t("heading_convert", _lang))
dcol1, dcol2, dcol3 = st.columns([2, 2, 3])
with dcol1:
    date_val = st.date_input(t("label_date", _lang), value=datetime.date.today())
with dcol2:
    time_val = st.time_input(t("label_time", _lang), value=datetime.time(0, 0), step=300)
with dcol3:
    tz_name = st.selectbox(
        t("label_timezone", _lang),
        pytz.common_timezones,
        index=pytz.common_timezones.index("UTC"),
    )

try:
    local_dt = pytz.timezone(tz_name).localize(
        datetime.datetime.combine(date_val, time_val), is_dst=None
    )
    _clock_face(clock.format(clock.from_datetime(local_dt), style, options))
except InvalidTimeError as e:
    st.error(t("error_time", _lang).format(error=html.escape(str(e))))

# --- Parse ---
text = st.text_input(t("label_parse", _lang))
if text.strip():
    try:
        parsed = clock.parse(text.strip())
        _clock_face(clock.format(parsed, "full", options))
        st.caption(t("parsed_utc", _lang).format(utc=clock.to_datetime(parsed).isoformat()))
    except FormatError as e:
        st.error(t("error_parse", _lang).format(error=html.escape(str(e))))
