import streamlit as st
from travelhub_admin.config import PAGE_TITLE, PAGE_ICON, LAYOUT
from travelhub_admin.utils.api_client import api_client
from travelhub_admin.utils.session import init_session_state, language_selector

# Page configuration
st.set_page_config(
    page_title=PAGE_TITLE,
    page_icon=PAGE_ICON,
    layout=LAYOUT,
    initial_sidebar_state="expanded"
)

init_session_state()

with st.sidebar:
    language_selector()
    st.markdown("---")

    st.header("📊 API Status")
    health_response = api_client.get_health()
    if health_response.get("success"):
        st.success("🟢 API Online")
        st.caption(f"Environment: {health_response.get('environment', 'unknown')}")
    else:
        st.error("🔴 API Offline")
        st.caption("Pages will show example data until the API is reachable.")

st.title("✈️ TravelHub Admin")
st.markdown("Manage destinations and hotels, with English and Arabic content for every record.")

col1, col2 = st.columns(2)

with col1:
    st.subheader("🌍 Destinations")
    st.write("Create and edit places, their photos and bilingual descriptions.")
    destinations = api_client.get_destinations()
    if destinations.get("success"):
        st.metric("Destinations", destinations.get("count", 0))

with col2:
    st.subheader("🏨 Hotels")
    st.write("Link hotels to destinations, set prices, ratings and amenities.")
    hotels = api_client.get_hotels()
    if hotels.get("success"):
        st.metric("Hotels", hotels.get("count", 0))

st.info("💡 Use the sidebar to open the Destinations or Hotels page.")
