import streamlit as st
from travelhub.utils.localization import localized_view
from travelhub_admin.utils.api_client import api_client
from travelhub_admin.utils.forms import validate_destination_form, build_destination_payload, language_form_values
from travelhub_admin.utils.sample_data import SAMPLE_DESTINATIONS, sample_hotels_for
from travelhub_admin.utils.session import init_session_state, language_selector, check_api_response, text_direction

st.set_page_config(page_title="Destinations - TravelHub Admin", page_icon="🌍", layout="wide")

init_session_state()
language_selector()
language = st.session_state.language

st.title("🌍 Destinations")

if "show_destination_form" not in st.session_state:
    st.session_state.show_destination_form = False

with st.sidebar:
    st.header("Actions")
    if st.button("➕ Add New Destination"):
        st.session_state.show_destination_form = True
        st.session_state.editing_id = None
    if st.button("🔄 Refresh"):
        st.rerun()


def load_destinations():
    response = api_client.get_destinations()
    if response.get("success"):
        return response.get("data", []), False
    st.warning(f"⚠️ Could not load destinations ({response.get('error')}). Showing example data for preview only.")
    return SAMPLE_DESTINATIONS, True


def close_form():
    st.session_state.show_destination_form = False
    st.session_state.editing_id = None


def show_destination_form(destination=None):
    """Create / edit form with paired English and Arabic tabs."""
    destination = destination or {}
    initial = language_form_values(destination)
    editing = bool(destination.get("id"))

    st.subheader(f"✏️ Edit Destination: {destination['name']}" if editing else "Add New Destination")

    with st.form("destination_form"):
        col1, col2 = st.columns(2)
        with col1:
            name = st.text_input("Name*", value=destination.get("name", ""))
            country = st.text_input("Country*", value=destination.get("country", ""))
        with col2:
            image_url = st.text_input("Image URL", value=destination.get("imageUrl", ""))
        description = st.text_area("Description*", value=destination.get("description", ""))

        en_tab, ar_tab = st.tabs(["English", "العربية"])
        with en_tab:
            en_name = st.text_input("Name (English)*", value=initial["enName"])
            en_description = st.text_area("Description (English)*", value=initial["enDescription"])
        with ar_tab:
            ar_name = st.text_input("الاسم*", value=initial["arName"])
            ar_description = st.text_area("الوصف*", value=initial["arDescription"])

        col1, col2 = st.columns(2)
        with col1:
            submit = st.form_submit_button("💾 Save", type="primary")
        with col2:
            cancel = st.form_submit_button("Cancel")

    if cancel:
        close_form()
        st.rerun()

    if submit:
        values = {
            "name": name, "country": country, "description": description, "imageUrl": image_url,
            "enName": en_name, "enDescription": en_description,
            "arName": ar_name, "arDescription": ar_description,
        }
        errors = validate_destination_form(values)
        if errors:
            for error in errors:
                st.error(f"❌ {error}")
            return

        payload = build_destination_payload(values)
        with st.spinner("💾 Saving destination..."):
            if editing:
                response = api_client.update_destination(destination["id"], payload)
            else:
                response = api_client.create_destination(payload)

        if check_api_response(response):
            st.success(f"✅ Destination {'updated' if editing else 'created'} successfully!")
            close_form()
            st.rerun()


def show_destination_hotels(destination, preview_only: bool):
    if preview_only:
        hotels = sample_hotels_for(destination["id"])
    else:
        response = api_client.get_destination_hotels(destination["id"])
        if not check_api_response(response):
            return
        hotels = response.get("data", [])

    if not hotels:
        st.caption("No hotels in this destination yet.")
    for hotel in hotels:
        st.write(f"• {localized_view(hotel, language)['name']} · {'⭐' * int(hotel.get('stars', 0))}")


def show_destination_card(destination, preview_only: bool):
    view = localized_view(destination, language)

    with st.container(border=True):
        if destination.get("imageUrl"):
            st.image(destination["imageUrl"], use_container_width=True)
        st.markdown(f"<h3 dir='{text_direction(language)}'>{view['name']}</h3>", unsafe_allow_html=True)
        st.caption(f"📍 {destination.get('country', '')} · 🏨 {destination.get('hotelsCount', 0)} hotels")
        st.markdown(f"<p dir='{text_direction(language)}'>{view['description']}</p>", unsafe_allow_html=True)

        with st.expander("🏨 Hotels"):
            show_destination_hotels(destination, preview_only)

        if preview_only:
            return

        col1, col2 = st.columns(2)
        with col1:
            if st.button("✏️ Edit", key=f"edit_{destination['id']}"):
                st.session_state.show_destination_form = True
                st.session_state.editing_id = destination["id"]
                st.rerun()
        with col2:
            if st.button("🗑️ Delete", key=f"delete_{destination['id']}"):
                st.session_state.confirm_delete_id = destination["id"]
                st.rerun()

        if st.session_state.confirm_delete_id == destination["id"]:
            st.warning("Delete this destination? Its hotels are kept.")
            col1, col2 = st.columns(2)
            with col1:
                if st.button("Yes, delete", key=f"confirm_{destination['id']}", type="primary"):
                    if check_api_response(api_client.delete_destination(destination["id"])):
                        st.session_state.confirm_delete_id = None
                        st.success("✅ Destination deleted")
                        st.rerun()
            with col2:
                if st.button("Keep", key=f"keep_{destination['id']}"):
                    st.session_state.confirm_delete_id = None
                    st.rerun()


destinations, preview_only = load_destinations()

if st.session_state.show_destination_form:
    editing = next((d for d in destinations if d.get("id") == st.session_state.editing_id), None)
    show_destination_form(editing)
    st.markdown("---")

if not destinations:
    st.info("No destinations yet. Use **Add New Destination** to create one.")

columns = st.columns(3)
for index, destination in enumerate(destinations):
    with columns[index % 3]:
        show_destination_card(destination, preview_only)
