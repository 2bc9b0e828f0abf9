import streamlit as st
from travelhub.utils.localization import localized_view, resolve
from travelhub_admin.utils.api_client import api_client
from travelhub_admin.utils.forms import (
    validate_hotel_form, build_hotel_payload, language_form_values, add_amenity, remove_amenity
)
from travelhub_admin.utils.sample_data import SAMPLE_DESTINATIONS, SAMPLE_HOTELS
from travelhub_admin.utils.session import init_session_state, language_selector, check_api_response, text_direction

st.set_page_config(page_title="Hotels - TravelHub Admin", page_icon="🏨", layout="wide")

init_session_state()
language_selector()
language = st.session_state.language

st.title("🏨 Hotels")

if "show_hotel_form" not in st.session_state:
    st.session_state.show_hotel_form = False


def load_destinations():
    response = api_client.get_destinations()
    if response.get("success"):
        return response.get("data", []), False
    return SAMPLE_DESTINATIONS, True


def destination_label(destination) -> str:
    return f"{resolve(destination, language, 'name')} ({destination.get('country', '')})"


destinations, preview_only = load_destinations()
destination_ids = [d["id"] for d in destinations]
destinations_by_id = {d["id"]: d for d in destinations}

# ===== SIDEBAR FILTERS =====
with st.sidebar:
    st.header("Actions")
    if st.button("➕ Add New Hotel", disabled=preview_only):
        st.session_state.show_hotel_form = True
        st.session_state.editing_id = None
        st.session_state.amenities = []

    st.markdown("---")
    st.header("🔍 Filters")
    filter_destination = st.selectbox(
        "Destination",
        [None] + destination_ids,
        format_func=lambda d: "All destinations" if d is None else destination_label(destinations_by_id[d])
    )
    min_price, max_price = st.slider("Price per night", 0, 2000, (0, 2000), step=10)
    min_rating = st.slider("Minimum rating", 0.0, 5.0, 0.0, step=0.5)
    amenity_filter = st.text_input("Amenities (comma separated)")
    sort_by = st.selectbox("Sort by", ["createdAt", "pricePerNight", "priceFrom", "rating", "stars", "name"])
    sort_order = st.radio("Order", ["desc", "asc"], horizontal=True)


def load_hotels():
    amenities = [a.strip() for a in amenity_filter.split(",") if a.strip()]
    response = api_client.filter_hotels(
        destination_id=filter_destination,
        min_price=min_price if min_price > 0 else None,
        max_price=max_price if max_price < 2000 else None,
        min_rating=min_rating if min_rating > 0 else None,
        amenities=amenities,
        sort_by=sort_by,
        sort_order=sort_order
    )
    if response.get("success"):
        return response.get("data", []), False
    st.warning(f"⚠️ Could not load hotels ({response.get('error')}). Showing example data for preview only.")
    return SAMPLE_HOTELS, True


def close_form():
    st.session_state.show_hotel_form = False
    st.session_state.editing_id = None
    st.session_state.amenities = []


def show_amenity_editor():
    """Amenities live in session state so they survive form reruns."""
    st.markdown("**Amenities**")
    col1, col2 = st.columns([3, 1])
    with col1:
        new_amenity = st.text_input("Add amenity", key="new_amenity", label_visibility="collapsed")
    with col2:
        if st.button("➕ Add"):
            st.session_state.amenities = add_amenity(st.session_state.amenities, new_amenity)
            st.rerun()

    for amenity in st.session_state.amenities:
        col1, col2 = st.columns([3, 1])
        col1.write(f"• {amenity}")
        if col2.button("✖", key=f"remove_{amenity}"):
            st.session_state.amenities = remove_amenity(st.session_state.amenities, amenity)
            st.rerun()


def show_hotel_form(hotel=None):
    hotel = hotel or {}
    initial = language_form_values(hotel)
    editing = bool(hotel.get("id"))

    st.subheader(f"✏️ Edit Hotel: {hotel['name']}" if editing else "Add New Hotel")

    if not destinations:
        st.info("Create a destination first.")
        return

    show_amenity_editor()

    with st.form("hotel_form"):
        col1, col2 = st.columns(2)
        with col1:
            name = st.text_input("Name*", value=hotel.get("name", ""))
            current = hotel.get("destinationId")
            destination_id = st.selectbox(
                "Destination*",
                destination_ids,
                index=destination_ids.index(current) if current in destination_ids else 0,
                format_func=lambda d: destination_label(destinations_by_id[d])
            )
            address = st.text_input("Address*", value=hotel.get("address", ""))
            image_url = st.text_input("Image URL", value=hotel.get("imageUrl", ""))
        with col2:
            stars = st.number_input("Stars*", min_value=1, max_value=5, value=int(hotel.get("stars", 3)))
            rating = st.number_input("Rating*", min_value=0.0, max_value=5.0, value=float(hotel.get("rating", 4.0)), step=0.1)
            price_from = st.number_input("Price from*", min_value=0.0, value=float(hotel.get("priceFrom", 0.0)), step=10.0)
            price_per_night = st.number_input(
                "Price per night (defaults to price from)", min_value=0.0,
                value=float(hotel.get("pricePerNight", 0.0)), step=10.0
            )
        description = st.text_area("Description*", value=hotel.get("description", ""))

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
            "name": name, "destinationId": destination_id, "description": description,
            "address": address, "imageUrl": image_url,
            "stars": stars, "rating": rating, "priceFrom": price_from,
            "pricePerNight": price_per_night or None,
            "amenities": st.session_state.amenities,
            "enName": en_name, "enDescription": en_description,
            "arName": ar_name, "arDescription": ar_description,
        }
        errors = validate_hotel_form(values)
        if errors:
            for error in errors:
                st.error(f"❌ {error}")
            return

        payload = build_hotel_payload(values)
        with st.spinner("💾 Saving hotel..."):
            if editing:
                response = api_client.update_hotel(hotel["id"], payload)
            else:
                response = api_client.create_hotel(payload)

        if check_api_response(response):
            st.success(f"✅ Hotel {'updated' if editing else 'created'} successfully!")
            close_form()
            st.rerun()


def show_hotel_card(hotel, preview_only: bool):
    view = localized_view(hotel, language)
    destination = hotel.get("destination")

    with st.container(border=True):
        col1, col2 = st.columns([1, 2])
        with col1:
            if hotel.get("imageUrl"):
                st.image(hotel["imageUrl"], use_container_width=True)
            st.write("⭐" * int(hotel.get("stars", 0)))
        with col2:
            st.markdown(f"<h3 dir='{text_direction(language)}'>{view['name']}</h3>", unsafe_allow_html=True)
            if destination:
                st.caption(f"📍 {resolve(destination, language, 'name')} · {hotel.get('address', '')}")
            else:
                st.caption(f"📍 Unknown destination · {hotel.get('address', '')}")
            st.markdown(f"<p dir='{text_direction(language)}'>{view['description']}</p>", unsafe_allow_html=True)
            st.write(f"💰 from ${hotel.get('priceFrom', 0):,.0f} · ⭐ {hotel.get('rating', 0)}")
            if hotel.get("amenities"):
                st.caption(" · ".join(hotel["amenities"]))

        if preview_only:
            return

        col1, col2 = st.columns(2)
        with col1:
            if st.button("✏️ Edit", key=f"edit_{hotel['id']}"):
                st.session_state.show_hotel_form = True
                st.session_state.editing_id = hotel["id"]
                st.session_state.amenities = list(hotel.get("amenities", []))
                st.rerun()
        with col2:
            if st.button("🗑️ Delete", key=f"delete_{hotel['id']}"):
                st.session_state.confirm_delete_id = hotel["id"]
                st.rerun()

        if st.session_state.confirm_delete_id == hotel["id"]:
            st.warning(f"Delete {hotel['name']}?")
            col1, col2 = st.columns(2)
            with col1:
                if st.button("Yes, delete", key=f"confirm_{hotel['id']}", type="primary"):
                    if check_api_response(api_client.delete_hotel(hotel["id"])):
                        st.session_state.confirm_delete_id = None
                        st.success("✅ Hotel deleted")
                        st.rerun()
            with col2:
                if st.button("Keep", key=f"keep_{hotel['id']}"):
                    st.session_state.confirm_delete_id = None
                    st.rerun()


hotels, hotels_preview = load_hotels()

if st.session_state.show_hotel_form:
    editing = next((h for h in hotels if h.get("id") == st.session_state.editing_id), None)
    show_hotel_form(editing)
    st.markdown("---")

st.caption(f"{len(hotels)} hotel(s)")
if not hotels:
    st.info("No hotels match the current filters.")

for hotel in hotels:
    show_hotel_card(hotel, preview_only or hotels_preview)
