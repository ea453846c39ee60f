#!/usr/bin/env python
"""
Interactive walkthrough: air-quality monitor maps (northwest Indiana).

Purpose
-------
Show the four map sections side by side in one browser page:
static boundary map, "lat:long" widget map, GeoJSON leaflet map and the
UTM zone 16 -> longitude/latitude reprojection.

Run
---
streamlit run webmap/app.py

Output
------
Rendered Streamlit interface. The GeoJSON section writes its intermediate
file to a temporary folder that is removed once the map is built.
"""

import sys
from pathlib import Path

import streamlit as st
import geopandas as gpd
from shapely.geometry import box
from streamlit_folium import st_folium

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from aqmaps import config, qc
from aqmaps.basemap import load_boundaries, plot_static_map
from aqmaps.leaflet import table_leaflet_map
from aqmaps.samples import monitors, chemistry
from aqmaps.spatial import reproject_table
from aqmaps.widgets import latlong_table, widget_map

# ============================================================================
# SETUP
# ============================================================================
st.set_page_config(page_title="Air-quality monitor maps", layout="wide")
st.markdown("# Air-Quality Monitors: Four Ways to Map Them")
st.markdown("Static, widget, GeoJSON and reprojected views of the same sample data.")

# ============================================================================
# LOAD DATA
# ============================================================================
@st.cache_data
def load_data():
    df = monitors()
    for check in (qc.check_unique_ids, qc.check_coordinates_numeric, qc.check_coordinate_ranges):
        check(df)
    return df, chemistry()


@st.cache_data(show_spinner="Downloading boundaries...")
def cached_boundaries(level, offline):
    if offline:
        minx, miny, maxx, maxy = -88.10, 37.77, -84.78, 41.76
        return gpd.GeoDataFrame({'region': ['indiana']}, geometry=[box(minx, miny, maxx, maxy)], crs=config.CRS_WEB)
    return load_boundaries(level)


try:
    df_monitors, df_chem = load_data()
except Exception as e:
    st.error(f"Error loading data: {e}")
    st.stop()

# ============================================================================
# SIDEBAR CONTROLS
# ============================================================================
st.sidebar.markdown("## Options")
offline = st.sidebar.checkbox("Offline boundaries (bounding box)", value=False)
show_labels = st.sidebar.checkbox("Label monitors on static map", value=True)
map_type = st.sidebar.selectbox("Widget map type", list(config.WIDGET_MAP_TYPES))
base_map = st.sidebar.selectbox("Leaflet base map", list(config.LEAFLET_BASE_MAPS))

st.sidebar.markdown(f"### Monitors: {len(df_monitors)}")
st.sidebar.dataframe(df_monitors, hide_index=True)

tab_static, tab_widget, tab_geojson, tab_utm = st.tabs(
    ["Static map", "Widget map", "GeoJSON map", "UTM reprojection"]
)

# ============================================================================
# SECTION 1: STATIC MAP
# ============================================================================
with tab_static:
    try:
        states = cached_boundaries('state', offline)
        fig, _ = plot_static_map(
            df_monitors, 'indiana', boundaries=states,
            labels=show_labels, title='Air-quality monitors, Indiana'
        )
        st.pyplot(fig)
    except Exception as e:
        st.error(f"Static map failed: {e}. Try the offline boundaries option.")

# ============================================================================
# SECTION 2: WIDGET MAP
# ============================================================================
with tab_widget:
    table = latlong_table(df_monitors, tip_col='name')
    st.dataframe(table, hide_index=True)
    m = widget_map(table, map_type=map_type)
    st_folium(m, width=1200, height=550, key="widget_map")

# ============================================================================
# SECTION 3: GEOJSON MAP
# ============================================================================
with tab_geojson:
    m_geojson = table_leaflet_map(df_monitors, title='monitors', base_map=base_map, popup=['name', 'id'])
    st.caption("Monitors converted to GeoJSON in a temporary folder, removed after rendering.")
    st_folium(m_geojson, width=1200, height=550, key="geojson_map")

# ============================================================================
# SECTION 4: UTM REPROJECTION
# ============================================================================
with tab_utm:
    try:
        gdf_ll, log = reproject_table(df_chem)
    except Exception as e:
        st.error(f"Reprojection failed: {e}")
        st.stop()

    col1, col2 = st.columns(2)
    with col1:
        st.markdown("### UTM zone 16N (input)")
        st.dataframe(df_chem, hide_index=True)
    with col2:
        st.markdown("### Longitude/latitude (output)")
        st.dataframe(gdf_ll[['sample_id', 'site', 'long', 'lat']], hide_index=True)

    st.code("\n".join(log))

    utm_table = latlong_table(gdf_ll, tip_col='site')
    st_folium(widget_map(utm_table, map_type=map_type), width=1200, height=450, key="utm_map")
