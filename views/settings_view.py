"""
Settings View - profile username and search provider status.
"""

import streamlit as st

from config.settings import (
    get_spotify_config_issues,
    get_tmdb_config_issues,
    get_unsplash_config_issues,
)
from controllers.planner_controller import PlannerController
from controllers.username_controller import UsernameController
from services.username_service import UsernameService
from views.components import render_account_sidebar, render_username_input

PROVIDERS = (
    ("TMDB", "Movie search and posters", get_tmdb_config_issues),
    ("Spotify", "Music track search", get_spotify_config_issues),
    ("Unsplash", "Cover photo search", get_unsplash_config_issues),
)


class SettingsView:
    """View for profile and integration settings."""

    def __init__(self):
        self.planner = PlannerController()
        self.user = self.planner.get_current_user()

    def render(self):
        """Main render method."""
        message = self.planner.pop_flash()
        if message:
            st.toast(message)

        render_account_sidebar(
            user=self.user,
            can_sign_out=self.planner.is_demo_session(),
            on_sign_in=self.planner.sign_in_demo,
            on_sign_out=self.planner.sign_out_demo,
        )

        st.title("⚙️ Settings")

        profile_tab, integrations_tab = st.tabs(["Profile", "Integrations"])
        with profile_tab:
            self._render_profile()
        with integrations_tab:
            self._render_integrations()

    def _render_profile(self):
        if self.user is None:
            st.info("Sign in to edit your profile.")
            return

        st.markdown(f"**Name:** {self.user.name}")
        if self.user.email:
            st.markdown(f"**Email:** {self.user.email}")

        controller = UsernameController(
            UsernameService(self.planner.workspace.users),
            current_user_id=self.user.id,
            current_username=self.user.username,
        )
        render_username_input(
            controller,
            on_save=lambda username: self._save_username(controller, username),
        )

    def _save_username(self, controller: UsernameController, username: str):
        self.planner.update_username(self.user, username)
        controller.current_username = username
        controller.reset()

    def _render_integrations(self):
        st.caption("Provider keys are read from environment variables or .env.")
        for name, purpose, get_issues in PROVIDERS:
            issues = get_issues()
            with st.container(border=True):
                col_name, col_status = st.columns([3, 1])
                with col_name:
                    st.markdown(f"**{name}**")
                    st.caption(purpose)
                with col_status:
                    if issues:
                        st.badge("Not configured", color="orange")
                    else:
                        st.badge("Ready", color="green")
                for issue in issues:
                    st.caption(f"• {issue}")
