"""
Air-quality monitor maps
Package for plotting monitor locations on static and interactive maps,
and for reprojecting UTM coordinates to longitude/latitude.
"""

__version__ = "1.0.0"

# Lazy imports to avoid long startup times (matplotlib, folium, pyproj)
# Import as needed in code

__all__ = ["config", "samples", "io", "qc", "spatial", "basemap", "widgets", "leaflet"]
