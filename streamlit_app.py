"""
Group Planner - Home Page

Plan events with friends: vote on polls, pick cover images and keep up
with the people you meet.
"""

import streamlit as st

# Page configuration (must be first Streamlit command)
st.set_page_config(
    page_title="Group Planner",
    page_icon="🎉",
    layout="wide"
)

from config import configure_logging
from views.home_view import HomeView

configure_logging()

view = HomeView()
view.render()
