import streamlit as st
from streamlit_folium import st_folium

from placemap import Viewpoint, create_map

st.set_page_config(
    page_title="Place Locator",
    page_icon="📍",
    layout="wide",
)

START_POINTS = {
    "Tokyo Station": {"center": [35.681236, 139.767125], "zoom": 13},
    "Osaka Station": {"center": [34.702485, 135.495951], "zoom": 13},
    "Kyoto Station": {"center": [34.985849, 135.758767], "zoom": 13},
    "Sapporo Station": {"center": [43.068661, 141.350755], "zoom": 13},
}


def main():
    st.title("Place Locator")
    st.caption("Nominatim geocoding • Leaflet map • OpenStreetMap tiles")

    with st.sidebar:
        st.header("Map controls")
        with st.form("controls"):
            start_name = st.selectbox("Start point", list(START_POINTS.keys()))
            place_name = st.text_input("Place to mark", "東京タワー")
            submitted = st.form_submit_button("Show map", type="primary")
        st.caption("Map data © OpenStreetMap contributors. Search by Nominatim.")

    # reruns that are not form submissions keep showing the last search
    if submitted:
        st.session_state["search"] = (start_name, place_name)
    start_name, place_name = st.session_state.get("search", (start_name, None))

    start = Viewpoint.from_dict(START_POINTS[start_name])
    session = create_map("place-map", start, place_name)

    with st.spinner("Looking up the place..."):
        latlng = session.wait()

    if place_name and latlng is None:
        st.info(f"Could not find “{place_name}”. Showing {start_name} only.")
    elif latlng is not None:
        st.caption(f"{place_name}: {latlng[0]:.5f}, {latlng[1]:.5f}")

    st_folium(session.map, key=session.container_id, height=600, returned_objects=[])


if __name__ == "__main__":
    main()
