"""
Leaflet module: interactive web map from a GeoJSON file.
"""

import html
import tempfile
import webbrowser
from pathlib import Path

import folium

from . import config
from .io import load_geojson, table_to_geojson


def build_leaflet_map(data, title="map", base_map="osm", popup=None):
    """
    Build a Leaflet (folium) map from a GeoJSON file.

    The features are embedded in the map, so the GeoJSON file is not
    needed once this returns.

    Args:
        data: Path to a GeoJSON file
        title: Map title shown above the map
        base_map: One of LEAFLET_BASE_MAPS ('osm', 'tls', 'topo', 'satellite')
        popup: Property name or list of names to show on click;
               None or '*' shows all properties

    Returns:
        folium.Map
    """
    if base_map not in config.LEAFLET_BASE_MAPS:
        raise ValueError(f"Unknown base_map '{base_map}'. Expected one of: {list(config.LEAFLET_BASE_MAPS)}")

    data = Path(data)
    gdf = load_geojson(data)

    properties = [c for c in gdf.columns if c != gdf.geometry.name]
    if popup is None or popup == '*':
        popup_fields = properties
    else:
        popup_fields = [popup] if isinstance(popup, str) else list(popup)
        missing = [f for f in popup_fields if f not in properties]
        if missing:
            raise ValueError(f"Popup properties not found in {data.name}: {missing}")

    minx, miny, maxx, maxy = gdf.total_bounds
    m = folium.Map(
        location=[(miny + maxy) / 2, (minx + maxx) / 2],
        zoom_start=config.ZOOM_START,
        tiles=config.LEAFLET_BASE_MAPS[base_map],
    )

    folium.GeoJson(
        gdf.to_json(),
        name=title,
        marker=folium.CircleMarker(**config.LEAFLET_POINT_STYLE),
        popup=folium.GeoJsonPopup(fields=popup_fields) if popup_fields else None,
        tooltip=folium.GeoJsonTooltip(fields=popup_fields[:1]) if popup_fields else None,
    ).add_to(m)

    m.fit_bounds([[miny, minx], [maxy, maxx]])

    title_html = f'<h3 align="center" style="font-size:16px;margin:4px"><b>{html.escape(title)}</b></h3>'
    m.get_root().html.add_child(folium.Element(title_html))

    return m


def leaflet_map(data, dest=None, title="map", name=None, base_map="osm", popup=None,
                open_browser=False):
    """
    Render a GeoJSON file as a Leaflet web map and save it as HTML.

    Args:
        data: Path to a GeoJSON file
        dest: Output directory (default: folder of ``data``)
        title: Map title shown above the map
        name: HTML file stem (default: stem of ``data``)
        base_map, popup: See build_leaflet_map
        open_browser: Open the page in the default web browser

    Returns:
        Path to the HTML file
    """
    data = Path(data)
    m = build_leaflet_map(data, title=title, base_map=base_map, popup=popup)

    dest = Path(dest) if dest is not None else data.parent
    dest.mkdir(parents=True, exist_ok=True)

    out_path = dest / f"{name or data.stem}.html"
    m.save(str(out_path))

    if open_browser:
        webbrowser.open(out_path.resolve().as_uri())

    return out_path


def table_leaflet_map(df, title="map", base_map="osm", popup=None, lat_col="lat", lon_col="long"):
    """
    Table -> GeoJSON -> Leaflet map, with the GeoJSON in a temporary folder
    that is removed before returning.

    Returns:
        folium.Map
    """
    with tempfile.TemporaryDirectory(prefix="aqmaps_") as tmp:
        geojson_path = table_to_geojson(df, dest=tmp, lat_col=lat_col, lon_col=lon_col)
        return build_leaflet_map(geojson_path, title=title, base_map=base_map, popup=popup)
