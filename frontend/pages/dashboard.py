"""Landing page shown after a successful sign-in."""

import streamlit as st

st.set_page_config(page_title="Dashboard · Blogify", page_icon="📝")

user = st.session_state.get("signed_in_user")

st.title("📝 Dashboard")
if user:
    st.success(f"Signed in as {user.get('name')} ({user.get('email')})", icon="✅")
else:
    st.info("You are not signed in.")

if st.button("Back to sign in"):
    st.session_state.pop("signin_form", None)
    st.switch_page("streamlit_app.py")
