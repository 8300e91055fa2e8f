"""
Cover image picker.

Browse bundled images by category or search Unsplash and TMDB. The
selected image goes to the controller's on_image_selected callback.
"""

import streamlit as st

from controllers.image_picker_controller import ImagePickerController

GRID_COLUMNS = 4


def render_image_picker(controller: ImagePickerController):
    """Render the picker while it is open."""
    if not controller.is_open():
        return

    with st.container(border=True):
        col_title, col_close = st.columns([5, 1])
        with col_title:
            st.markdown("#### Choose a cover image")
        with col_close:
            if st.button("✕", key=f"{controller.key}_close", type="tertiary"):
                controller.close()
                st.rerun()

        _render_search(controller)

        if controller.get_query():
            _render_search_results(controller)
        else:
            _render_defaults(controller)


def _render_search(controller: ImagePickerController):
    with st.form(key=f"{controller.key}_search", border=False):
        col_query, col_submit = st.columns([4, 1])
        with col_query:
            query = st.text_input(
                "Search images",
                value=controller.get_query(),
                placeholder="Search Unsplash and TMDB...",
                label_visibility="collapsed",
            )
        with col_submit:
            submitted = st.form_submit_button("Search", width="stretch")

    if submitted:
        with st.spinner("Searching..."):
            controller.search(query)
        st.rerun()


def _render_defaults(controller: ImagePickerController):
    categories = controller.catalog.get_categories()
    if categories:
        names = [c.name for c in categories]
        labels = {c.name: f"{c.display_name} ({c.image_count})" for c in categories}
        current = controller.get_selected_category()
        selected = st.segmented_control(
            "Category",
            names,
            default=current if current in names else None,
            format_func=lambda name: labels[name],
            key=f"{controller.key}_category",
            label_visibility="collapsed",
        )
        if selected and selected != current:
            controller.select_category(selected)
            st.rerun()

    message = controller.empty_state_message()
    if message:
        st.info(message)
        return

    images = controller.get_default_images()
    columns = st.columns(GRID_COLUMNS)
    for index, image in enumerate(images):
        with columns[index % GRID_COLUMNS]:
            st.image(image.path or image.url, width="stretch")
            if st.button(image.title, key=f"{controller.key}_default_{image.category}_{image.filename}", width="stretch"):
                controller.select_default_image(image)
                st.rerun()


def _render_search_results(controller: ImagePickerController):
    if st.button("← Back to default images", key=f"{controller.key}_back", type="tertiary"):
        controller.search("")
        st.rerun()

    error = controller.get_error()
    if error:
        st.error(error)

    message = controller.empty_state_message()
    if message:
        st.info(message)
        return

    results = controller.get_search_results()
    for source, heading in (("unsplash", "Unsplash"), ("tmdb", "Movies & TV")):
        items = results[source]
        if not items:
            continue
        st.markdown(f"**{heading}**")
        columns = st.columns(GRID_COLUMNS)
        for index, item in enumerate(items):
            with columns[index % GRID_COLUMNS]:
                thumb = item.metadata.get("thumb_url") or item.image_url
                if thumb:
                    st.image(thumb, width="stretch")
                caption = item.metadata.get("photographer") or item.metadata.get("type_label") or ""
                if caption:
                    st.caption(f"📷 {caption}" if source == "unsplash" else f"{item.title} · {caption}")
                if st.button("Use", key=f"{controller.key}_{source}_{item.id}", width="stretch"):
                    controller.select_search_image(source, item)
                    st.rerun()

    if controller.can_load_more():
        if st.button("Load more", key=f"{controller.key}_more", width="stretch"):
            with st.spinner("Loading..."):
                controller.load_more()
            st.rerun()
