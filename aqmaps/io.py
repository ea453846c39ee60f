"""
I/O module: Load and save tables and GeoJSON layers.
"""

import tempfile
import warnings
from pathlib import Path

import pandas as pd
import geopandas as gpd

from . import config


def load_csv(filepath, required=None, **kwargs):
    """
    Load a sample table from CSV and check it carries the expected columns.

    Column names are stripped of surrounding whitespace before the check.

    Args:
        filepath: Path to CSV file
        required: Column names that must be present (e.g. easting/northing)
        **kwargs: Additional arguments for pd.read_csv()

    Returns:
        pd.DataFrame
    """
    filepath = Path(filepath)
    if not filepath.exists():
        raise FileNotFoundError(f"CSV file not found: {filepath}")

    df = pd.read_csv(filepath, **kwargs)
    df.columns = [str(c).strip() for c in df.columns]

    missing = [c for c in (required or []) if c not in df.columns]
    if missing:
        raise ValueError(f"Columns not found in {filepath.name}: {missing}")

    return df


def load_geojson(filepath, **kwargs):
    """
    Load GeoJSON file with CRS validation.

    Args:
        filepath: Path to GeoJSON file
        **kwargs: Additional arguments for gpd.read_file()

    Returns:
        geopandas.GeoDataFrame
    """
    filepath = Path(filepath)
    if not filepath.exists():
        raise FileNotFoundError(f"GeoJSON file not found: {filepath}")

    gdf = gpd.read_file(filepath, **kwargs)

    if gdf.crs is None:
        warnings.warn(f"⚠️  CRS missing in {filepath.name}. Assuming {config.CRS_WEB}")
        gdf = gdf.set_crs(config.CRS_WEB)

    return gdf


def save_geojson(gdf, filepath, **kwargs):
    """
    Save GeoDataFrame to GeoJSON.

    Args:
        gdf: GeoDataFrame to save
        filepath: Output path
        **kwargs: Additional arguments for gdf.to_file()

    Returns:
        Path to saved file
    """
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    # GeoJSON is lon/lat WGS84
    if gdf.crs is not None and gdf.crs != config.CRS_WEB:
        gdf = gdf.to_crs(config.CRS_WEB)

    gdf.to_file(filepath, driver="GeoJSON", **kwargs)

    return filepath


def table_to_geojson(df, dest=None, name="monitors", lat_col="lat", lon_col="long"):
    """
    Convert a coordinate table to a GeoJSON file of Point features.

    Every non-coordinate column is written as a feature property. When
    ``dest`` is omitted the file goes to a new temporary directory.

    Args:
        df: DataFrame with latitude/longitude columns (decimal degrees)
        dest: Output directory (default: fresh temp dir)
        name: File stem; the file is written as ``<name>.geojson``
        lat_col, lon_col: Coordinate column names

    Returns:
        Path to the GeoJSON file
    """
    missing = [c for c in (lat_col, lon_col) if c not in df.columns]
    if missing:
        raise ValueError(f"Coordinate columns not found: {missing}")

    if dest is None:
        dest = tempfile.mkdtemp(prefix="aqmaps_")

    properties = df.drop(columns=[lat_col, lon_col])
    gdf = gpd.GeoDataFrame(
        properties,
        geometry=gpd.points_from_xy(df[lon_col], df[lat_col]),
        crs=config.CRS_WEB,
    )

    return save_geojson(gdf, Path(dest) / f"{name}.geojson")


def save_csv(df, filepath, **kwargs):
    """
    Save DataFrame to CSV.

    Args:
        df: DataFrame to save
        filepath: Output path
        **kwargs: Additional arguments for df.to_csv()

    Returns:
        Path to saved file
    """
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    # Geometry column does not survive CSV; coordinates are kept as columns
    if isinstance(df, gpd.GeoDataFrame):
        df = pd.DataFrame(df.drop(columns=df.geometry.name))

    df.to_csv(filepath, index=False, **kwargs)

    return filepath


def file_size_mb(filepath):
    """Get file size in MB."""
    return Path(filepath).stat().st_size / (1024 ** 2)
