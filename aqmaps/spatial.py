"""
Spatial module: point geometries and coordinate reprojection (UTM <-> lon/lat).

All projection math is done by PROJ through pyproj / geopandas.
"""

import geopandas as gpd
from pyproj import CRS, Transformer

from . import config


def points_to_geodataframe(df, x_col='long', y_col='lat', crs=config.CRS_WEB):
    """
    Convert a DataFrame with x/y columns to a GeoDataFrame with Point geometries.

    Args:
        df: DataFrame with coordinate columns
        x_col: Column with x values (longitude or easting)
        y_col: Column with y values (latitude or northing)
        crs: CRS the coordinates are expressed in

    Returns:
        GeoDataFrame with Point geometries and log info
    """
    log = []

    missing = [c for c in (x_col, y_col) if c not in df.columns]
    if missing:
        raise ValueError(f"'{x_col}' and '{y_col}' columns required (missing: {missing})")

    gdf = gpd.GeoDataFrame(
        df.copy(),
        geometry=gpd.points_from_xy(df[x_col], df[y_col]),
        crs=crs
    )

    invalid = (~gdf.geometry.is_valid).sum()
    if invalid > 0:
        log.append(f"⚠️  Found {invalid} invalid geometries")

    log.append(f"✓ Created Point geometries for {len(gdf)} rows (CRS: {crs})")

    return gdf, log


def utm_crs(zone, south=False, datum=config.DEFAULT_DATUM):
    """Build the CRS for a UTM zone (1-60)."""
    if not 1 <= int(zone) <= 60:
        raise ValueError(f"UTM zone must be between 1 and 60, got {zone}")

    zone = int(zone)
    if datum.upper() == "WGS84":
        return CRS.from_epsg((32700 if south else 32600) + zone)

    hemisphere = " +south" if south else ""
    return CRS.from_proj4(f"+proj=utm +zone={zone}{hemisphere} +datum={datum} +units=m +no_defs")


def reproject_table(df, x_col='easting', y_col='northing',
                    source_crs=config.UTM16_PROJ4, target_crs=config.LONGLAT_PROJ4):
    """
    Reproject a table of points from one CRS to another.

    The input table is not modified. The result carries the original
    columns, the reprojected geometry and ``long``/``lat`` columns read from
    it (for a projected target these hold x/y in target units).

    Args:
        df: DataFrame with x/y columns in ``source_crs``
        x_col, y_col: Coordinate column names
        source_crs: CRS of the input coordinates (PROJ string, EPSG code, CRS)
        target_crs: CRS to transform to

    Returns:
        GeoDataFrame in ``target_crs`` and log info
    """
    gdf, log = points_to_geodataframe(df, x_col=x_col, y_col=y_col, crs=source_crs)

    gdf_target = gdf.to_crs(target_crs)
    gdf_target['long'] = gdf_target.geometry.x
    gdf_target['lat'] = gdf_target.geometry.y

    log.append(f"✓ Reprojected {len(gdf_target)} points")
    log.append(f"  - From: {source_crs}")
    log.append(f"  - To:   {target_crs}")
    log.append(
        f"  - Bounds: x {gdf_target['long'].min():.6f} to {gdf_target['long'].max():.6f}, "
        f"y {gdf_target['lat'].min():.6f} to {gdf_target['lat'].max():.6f}"
    )

    return gdf_target, log


def transform_point(x, y, source_crs, target_crs):
    """Transform a single x/y pair (x = easting or longitude)."""
    transformer = Transformer.from_crs(source_crs, target_crs, always_xy=True)
    return transformer.transform(x, y)


def to_utm(lon, lat, zone=16, south=False):
    """Geographic lon/lat (WGS84) -> UTM (easting, northing)."""
    return transform_point(lon, lat, config.CRS_WEB, utm_crs(zone, south=south))


def from_utm(easting, northing, zone=16, south=False):
    """UTM (easting, northing) -> geographic (lon, lat) WGS84."""
    return transform_point(easting, northing, utm_crs(zone, south=south), config.CRS_WEB)
