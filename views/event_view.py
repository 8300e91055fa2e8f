"""
Event View - event cards with status badges and the cover image picker.
"""

import streamlit as st

from controllers.image_picker_controller import ImagePickerController
from controllers.planner_controller import PlannerController
from models.entities import Event
from views.components import render_account_sidebar, render_image_picker, render_status_badge
from views.helpers.badges import friendly_status_message
from views.helpers.formatting import format_currency, pluralize


def _cover_source(event: Event) -> str:
    """Bundled covers load from disk; searched ones from their URL."""
    data = event.external_image_data or {}
    if data.get("source") == "default":
        return (data.get("metadata") or {}).get("path") or event.cover_image_url
    return event.cover_image_url


class EventView:
    """View for events."""

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

        st.title("🎉 Events")

        events = self.planner.get_events()
        if not events:
            st.info("No events yet.")
            return

        self._render_event_cards(events)

        st.markdown("---")
        titles = {e.id: e.title for e in events}
        event_id = st.selectbox(
            "Event details",
            list(titles),
            format_func=lambda event_id: titles[event_id],
            key="event_view_event",
        )
        self._render_event_detail(self.planner.get_event(event_id))

    def _render_event_cards(self, events: list[Event]):
        columns = st.columns(min(len(events), 4))
        for index, event in enumerate(events):
            with columns[index % len(columns)]:
                with st.container(border=True):
                    if event.cover_image_url:
                        st.image(_cover_source(event), width="stretch")
                    st.markdown(f"**{event.title}**")
                    if event.start_at:
                        st.caption(event.start_at.strftime("%a, %b %d, %Y"))
                    render_status_badge(event, format="compact")

    def _render_event_detail(self, event: Event):
        col_cover, col_info = st.columns([2, 3])

        with col_cover:
            if event.cover_image_url:
                st.image(_cover_source(event), width="stretch")
                source = (event.external_image_data or {}).get("source")
                if source and source != "default":
                    st.caption(f"Image from {source.capitalize()}")
            else:
                st.markdown("### 🖼️")
                st.caption("No cover image yet")

            if self.user:
                picker = ImagePickerController(
                    on_image_selected=lambda url, data: self.planner.set_cover_image(event.id, url, data),
                    key=f"image_picker_{event.id}",
                )
                if not picker.is_open() and st.button("Change cover image", key=f"open_picker_{event.id}"):
                    picker.open()
                    st.rerun()

        with col_info:
            st.subheader(event.title)
            render_status_badge(event, format="badge")
            st.markdown(friendly_status_message(event, "detailed"))

            facts = [f"{event.participant_count} {pluralize('people', event.participant_count, 'person')} going"]
            if event.threshold_revenue_cents:
                raised = format_currency(event.current_revenue_cents or 0)
                facts.append(f"{raised} of {format_currency(event.threshold_revenue_cents)} raised")
            st.caption(" · ".join(facts))

        if self.user:
            render_image_picker(picker)
