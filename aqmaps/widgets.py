"""
Widgets module: interactive map widget driven by a "lat:long" location column.

The widget table has one location column holding ``"<lat>:<long>"`` strings
and one tooltip column. Rendering is done with folium (Leaflet.js).
"""

from pathlib import Path

import folium
import pandas as pd

from . import config


def format_latlong(lat, lon):
    """Join latitude and longitude as "lat:long" without rounding."""
    return f"{lat}:{lon}"


def parse_latlong(value):
    """Split a "lat:long" string back into (lat, lon) floats."""
    parts = str(value).split(':')
    if len(parts) != 2:
        raise ValueError(f"Expected 'lat:long', got {value!r}")
    try:
        return float(parts[0]), float(parts[1])
    except ValueError:
        raise ValueError(f"Non-numeric coordinates in {value!r}") from None


def latlong_table(df, lat_col='lat', lon_col='long', tip_col='name'):
    """
    Build the widget input table.

    Args:
        df: DataFrame with coordinate and tooltip columns

    Returns:
        DataFrame with 'LatLong' and 'Tip' columns (same index as df)
    """
    missing = [c for c in (lat_col, lon_col, tip_col) if c not in df.columns]
    if missing:
        raise ValueError(f"Columns not found: {missing}")

    return pd.DataFrame({
        'LatLong': [format_latlong(lat, lon) for lat, lon in zip(df[lat_col], df[lon_col])],
        'Tip': df[tip_col].astype(str).values,
    }, index=df.index)


def widget_map(table, location_var='LatLong', tip_var='Tip', show_tip=True,
               map_type='normal', enable_scroll_wheel=True, use_map_type_control=False,
               zoom_start=None):
    """
    Create an interactive marker map from a "lat:long" table.

    Args:
        table: DataFrame with location and tooltip columns
        location_var: Column of "lat:long" strings
        tip_var: Column of tooltip text
        show_tip: Show tooltip text on hover (otherwise on click)
        map_type: One of WIDGET_MAP_TYPES ('normal', 'terrain', 'satellite', 'hybrid')
        enable_scroll_wheel: Allow zooming with the mouse wheel
        use_map_type_control: Add a layer control to switch map types
        zoom_start: Fixed zoom level; bounds are fitted to the points if None

    Returns:
        folium.Map
    """
    if map_type not in config.WIDGET_MAP_TYPES:
        raise ValueError(f"Unknown map_type '{map_type}'. Expected one of: {list(config.WIDGET_MAP_TYPES)}")

    coords = [parse_latlong(v) for v in table[location_var]]
    tips = table[tip_var].astype(str).tolist() if tip_var in table.columns else [None] * len(coords)

    center = config.MAP_CENTER
    if coords:
        center = (
            sum(lat for lat, _ in coords) / len(coords),
            sum(lon for _, lon in coords) / len(coords),
        )

    m = folium.Map(
        location=list(center),
        zoom_start=config.ZOOM_START if zoom_start is None else zoom_start,
        tiles=None,
        scrollWheelZoom=enable_scroll_wheel,
    )

    folium.TileLayer(config.WIDGET_MAP_TYPES[map_type], name=map_type).add_to(m)
    if use_map_type_control:
        added = {config.WIDGET_MAP_TYPES[map_type]}
        for other, tiles in config.WIDGET_MAP_TYPES.items():
            if tiles not in added:
                folium.TileLayer(tiles, name=other).add_to(m)
                added.add(tiles)
        folium.LayerControl().add_to(m)

    for (lat, lon), tip in zip(coords, tips):
        folium.Marker(
            location=[lat, lon],
            tooltip=tip if show_tip else None,
            popup=folium.Popup(tip, max_width=250) if tip else None,
        ).add_to(m)

    if coords and zoom_start is None:
        lats = [lat for lat, _ in coords]
        lons = [lon for _, lon in coords]
        m.fit_bounds([[min(lats), min(lons)], [max(lats), max(lons)]])

    return m


def render(m, filepath=None):
    """Write the widget map as a standalone HTML page."""
    filepath = Path(filepath or config.OUTPUT_FILES['widget_map'])
    filepath.parent.mkdir(parents=True, exist_ok=True)
    m.save(str(filepath))
    return filepath
