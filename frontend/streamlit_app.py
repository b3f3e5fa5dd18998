"""A Streamlit sign-in page for the Blogify demo backend."""

import streamlit as st
import requests

from frontend.signin_form import SignInForm

# --- Page and API Configuration ---
st.set_page_config(page_title="Sign in · Blogify", page_icon="📝", layout="centered")
API_BASE = "http://localhost:8000"
PAGES = {"/dashboard": "pages/dashboard.py"}


def get_form() -> SignInForm:
    """Gets the sign-in form for this page visit from streamlit's session state."""
    if "signin_form" not in st.session_state:
        st.session_state.signin_form = SignInForm(
            api_base=API_BASE, session=requests.Session(), navigate=navigate
        )
    return st.session_state.signin_form


def navigate(path: str):
    """Switches to the page registered for a path."""
    st.session_state.signed_in_user = get_form().signed_in_user
    st.switch_page(PAGES[path])


def on_field_change(field: str, widget_key: str):
    """Pushes a widget's new value into the form."""
    get_form().update_field(field, st.session_state[widget_key])


# --- Main App ---
st.title("📝 Sign in to Blogify")
st.caption("Use the demo account: demo@blogify.test / password123")

# --- API Health Check ---
try:
    health_response = requests.get(f"{API_BASE}/health", timeout=3)
    if (
        health_response.status_code != 200
        or health_response.json().get("status") != "healthy"
    ):
        st.warning("The sign-in API looks unhealthy. Sign in may fail.", icon="⚠️")
except (requests.exceptions.RequestException, ValueError):
    st.warning(
        "Could not reach the sign-in API. Please ensure the backend server is running.",
        icon="⚠️",
    )

form = get_form()

with st.container(border=True):
    if form.server_error:
        st.error(form.server_error, icon="🚨")

    st.text_input(
        "Email",
        key="email_input",
        placeholder="you@example.com",
        on_change=on_field_change,
        args=("email", "email_input"),
    )
    if form.error_for("email"):
        st.caption(f":red[{form.error_for('email')}]")

    st.text_input(
        "Password",
        type="password",
        key="password_input",
        on_change=on_field_change,
        args=("password", "password_input"),
    )
    if form.error_for("password"):
        st.caption(f":red[{form.error_for('password')}]")

    st.checkbox(
        "Remember me",
        key="remember_input",
        on_change=on_field_change,
        args=("remember", "remember_input"),
    )

    # submit() runs to completion inside this script run, and Streamlit runs one
    # script per session at a time, so the button never renders mid-request.
    # A click that lands during a request is answered IGNORED by the form.
    if st.button("Sign in", type="primary", use_container_width=True):
        with st.spinner("Signing in..."):
            form.submit()
        st.rerun()

# --- Social sign-in (placeholders) ---
st.divider()
google_col, github_col = st.columns(2)
google_col.button("Continue with Google", use_container_width=True, disabled=True)
github_col.button("Continue with GitHub", use_container_width=True, disabled=True)
