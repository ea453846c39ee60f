"""
Basemap module: static boundary maps with point markers, labels and titles.

Regions are addressed by lower-case names the way the boundary database
keys them: ``"indiana"`` at state level, ``"indiana,lake"`` at county level.
"""

import warnings
from pathlib import Path

import geopandas as gpd
import matplotlib.pyplot as plt
import pandas as pd

from . import config
from .spatial import points_to_geodataframe


def _region_keys(gdf):
    """Build the lower-case region key for every boundary row."""
    names = gdf['NAME'].astype(str).str.strip().str.lower()

    # County layers carry COUNTYFP; prefix with the state name
    if 'COUNTYFP' in gdf.columns and 'STATEFP' in gdf.columns:
        states = gdf['STATEFP'].astype(str).str.zfill(2).map(config.STATE_FIPS)
        return states.fillna('') + ',' + names

    return names


def load_boundaries(level='state', source=None):
    """
    Load a boundary layer and add a ``region`` key column.

    Args:
        level: Boundary database level ('state' or 'county')
        source: Explicit path/URL; defaults to BOUNDARY_SOURCES[level]

    Returns:
        GeoDataFrame in EPSG:4326 with a ``region`` column
    """
    if source is None:
        if level not in config.BOUNDARY_SOURCES:
            raise ValueError(
                f"Unknown boundary level '{level}'. Expected one of: {list(config.BOUNDARY_SOURCES)}"
            )
        source = config.BOUNDARY_SOURCES[level]
    elif isinstance(source, Path) and not source.exists():
        raise FileNotFoundError(f"Boundary file not found: {source}")

    gdf = gpd.read_file(source)

    if gdf.crs is None:
        warnings.warn(f"⚠️  CRS missing in boundary layer. Assuming {config.CRS_WEB}")
        gdf = gdf.set_crs(config.CRS_WEB)
    elif gdf.crs != config.CRS_WEB:
        gdf = gdf.to_crs(config.CRS_WEB)

    if 'region' not in gdf.columns:
        if 'NAME' not in gdf.columns:
            raise ValueError("Boundary layer needs a 'NAME' or 'region' column")
        gdf['region'] = _region_keys(gdf)

    return gdf


def select_regions(boundaries, regions):
    """
    Select boundary rows by region name.

    A name matches its own key exactly or, for county keys, every county of
    a state (``"indiana"`` selects ``"indiana,lake"``, ``"indiana,porter"``, ...).

    Args:
        boundaries: GeoDataFrame with a ``region`` or ``NAME`` column
        regions: A region name or a list of names (case-insensitive)

    Returns:
        GeoDataFrame subset
    """
    if isinstance(regions, str):
        regions = [regions]

    if 'region' in boundaries.columns:
        keys = boundaries['region'].str.lower()
    else:
        keys = _region_keys(boundaries)
    mask = pd.Series(False, index=boundaries.index)
    unmatched = []

    for name in regions:
        name = name.strip().lower()
        hit = (keys == name) | keys.str.startswith(name + ',')
        if not hit.any():
            unmatched.append(name)
        mask |= hit

    if not mask.any():
        raise ValueError(f"nothing to draw: no regions matched {list(regions)}")

    if unmatched:
        warnings.warn(f"⚠️  Regions not found and skipped: {unmatched}")

    return boundaries[mask]


def plot_static_map(points, regions, boundaries=None, level='state', labels=False,
                    label_col='name', title=None, ax=None, lat_col='lat', lon_col='long',
                    axes=False, boundary_style=None, marker_style=None, label_style=None):
    """
    Draw region boundaries and overlay point markers.

    Args:
        points: DataFrame with lat/long columns, or GeoDataFrame of points
        regions: Region name or list of names to outline
        boundaries: Pre-loaded boundary layer; loaded for ``level`` if None
        level: Boundary database level used when loading
        labels: Draw ``label_col`` next to every marker
        title: Optional map title
        ax: Existing matplotlib axes to draw on
        axes: Keep the lon/lat axes visible

    Returns:
        (fig, ax)
    """
    if boundaries is None:
        boundaries = load_boundaries(level)

    selected = select_regions(boundaries, regions)
    if selected.crs is not None and selected.crs != config.CRS_WEB:
        selected = selected.to_crs(config.CRS_WEB)

    if isinstance(points, gpd.GeoDataFrame):
        gdf_points = points.to_crs(config.CRS_WEB) if points.crs is not None else points
    else:
        gdf_points, _ = points_to_geodataframe(points, x_col=lon_col, y_col=lat_col)

    if ax is None:
        fig, ax = plt.subplots(figsize=config.FIGURE_SIZE)
    else:
        fig = ax.figure

    selected.plot(ax=ax, **{**config.BOUNDARY_STYLE, **(boundary_style or {})})
    gdf_points.plot(ax=ax, zorder=3, **{**config.MARKER_STYLE, **(marker_style or {})})

    if labels:
        if label_col not in gdf_points.columns:
            raise ValueError(f"Label column '{label_col}' not found")
        dx, dy = config.LABEL_OFFSET
        style = {**config.LABEL_STYLE, **(label_style or {})}
        for _, row in gdf_points.iterrows():
            ax.text(row.geometry.x + dx, row.geometry.y + dy, str(row[label_col]), zorder=4, **style)

    if title:
        ax.set_title(title)

    if axes:
        ax.set_xlabel('Longitude')
        ax.set_ylabel('Latitude')
    else:
        ax.set_axis_off()

    return fig, ax


def save_figure(fig, filepath, dpi=config.FIGURE_DPI):
    """Save a figure, creating the parent folder if needed."""
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)
    fig.tight_layout()
    fig.savefig(filepath, dpi=dpi)
    return filepath
