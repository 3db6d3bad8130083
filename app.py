"""PassMint -- Streamlit web interface."""

import streamlit as st

from passmint import MAX_SCORE, generate_password, score_strength
from passmint.audit import build_record, log_generation, new_user_id
from passmint.config import Config

# ── Lucide icons (from lucide.dev) ────────────────────────────────────────

_LUCIDE = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="{s}" height="{s}" '
    'viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" '
    'stroke-linecap="round" stroke-linejoin="round">{paths}</svg>'
)

ICON_SHIELD = _LUCIDE.format(s=32, paths=(
    '<path d="M20 13c0 5-3.5 7.5-7.66 8.95a1 1 0 0 1-.67-.01'
    'C7.5 20.5 4 18 4 13V6a1 1 0 0 1 1-1c2 0 4.5-1.2 6.24-2.72'
    'a1.17 1.17 0 0 1 1.52 0C14.51 3.81 17 5 19 5a1 1 0 0 1 1 1z"/>'
))

ICON_KEY_ROUND = _LUCIDE.format(s=20, paths=(
    '<path d="M2.586 17.414A2 2 0 0 0 2 18.828V21a1 1 0 0 0 1 1h3'
    'a1 1 0 0 0 1-1v-1a1 1 0 0 1 1-1h1a1 1 0 0 0 1-1v-1'
    'a1 1 0 0 1 1-1h.172a2 2 0 0 0 1.414-.586l.814-.814'
    'a6.5 6.5 0 1 0-4-4z"/>'
    '<circle cx="16.5" cy="7.5" r=".5" fill="currentColor"/>'
))

TIER_COLORS = {"danger": "#d32f2f", "warning": "#f57c00", "success": "#388e3c"}

# ── Page config ───────────────────────────────────────────────────────────

st.set_page_config(
    page_title="PassMint",
    page_icon="\U0001f511",
    layout="centered",
)

try:
    config = Config()
except ValueError as exc:
    st.warning(f"Ignoring settings: {exc}", icon="⚠️")
    config = Config(environ={})

# Anonymous id for metadata records, one per browser session
if "user_id" not in st.session_state:
    st.session_state.user_id = new_user_id()


def _show_report(report: dict, keyword: str) -> None:
    color = TIER_COLORS[report["tier"]]
    st.markdown(
        f"**Strength:** <span style='color:{color}'>{report['label']}</span>"
        f" &nbsp;·&nbsp; {report['score']}/{MAX_SCORE}",
        unsafe_allow_html=True,
    )
    st.progress(report["score"] / MAX_SCORE)

    analysis = report["analysis"]
    if keyword and analysis["has_keyword"]:
        st.success(f'Keyword "{keyword}" incorporated', icon="✅")
    if analysis["has_repeat_run"]:
        st.warning("Repeated characters detected (e.g. 'aaa')", icon="⚠️")
    if analysis["has_sequential_run"]:
        st.warning("Sequential pattern detected (e.g. 'abc', '123')", icon="⚠️")


# ── Header ────────────────────────────────────────────────────────────────

st.markdown(
    f'<h1 style="display:flex;align-items:center;gap:10px">'
    f'{ICON_SHIELD} PassMint</h1>',
    unsafe_allow_html=True,
)
st.caption(
    "Generate passwords with an optional memorable keyword.  \n"
    "Passwords are **NEVER** stored or logged - only generation metadata "
    "(length, options, strength) is recorded anonymously."
)

tab_generate, tab_score = st.tabs(["Generate Password", "Analyse Password"])

# ── Generate tab ───────────────────────────────────────────────────────────

with tab_generate:
    st.markdown(
        f'<p style="display:flex;align-items:center;gap:6px">'
        f'{ICON_KEY_ROUND} <strong>Generate a password</strong></p>',
        unsafe_allow_html=True,
    )
    keyword = st.text_input(
        "Keyword (optional)",
        max_chars=20,
        placeholder="Enter a keyword to include in your password…",
        help="Letters and digits of the keyword are mixed into the password",
    )
    col1, col2 = st.columns(2)
    with col1:
        length = st.slider("Length", 4, 128, min(max(config.default_length, 4), 128))
    with col2:
        selected = {
            "lowercase": st.checkbox("Lowercase (a-z)", value=True),
            "uppercase": st.checkbox("Uppercase (A-Z)", value=True),
            "digit": st.checkbox("Numbers (0-9)", value=True),
            "symbol": st.checkbox("Symbols (!@#)", value=False),
        }
    classes = [name for name, on in selected.items() if on]

    if st.button("Generate password", type="primary", disabled=not classes):
        pwd = generate_password(length, classes, keyword)
        report = score_strength(pwd, classes, keyword)
        st.code(pwd, language=None)
        _show_report(report, keyword)

        record = build_record(st.session_state.user_id, length, classes, report)
        log_generation(record, config=config)

# ── Analyse tab ────────────────────────────────────────────────────────────

with tab_score:
    password = st.text_input(
        "Password",
        placeholder="Enter a password…",
        autocomplete="off",
    )
    score_keyword = st.text_input("Keyword to look for (optional)")

    if password:
        _show_report(score_strength(password, keyword=score_keyword), score_keyword)
