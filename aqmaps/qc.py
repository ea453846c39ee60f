"""
Quality Control (QC) module: Assertions and data quality checks.
"""

import pandas as pd


def check_unique_ids(df, id_col='id'):
    """Assert IDs are unique (no duplicates)."""
    assert df[id_col].duplicated().sum() == 0, f"Duplicate {id_col} values found!"
    assert df[id_col].isnull().sum() == 0, f"Null {id_col} values found!"
    assert (df[id_col] >= 0).all(), f"Found negative {id_col} values!"
    return f"✓ {id_col} is unique (n={len(df)})"


def check_coordinates_numeric(df, lat_col='lat', lon_col='long'):
    """Assert coordinate columns are numeric and non-null."""
    for col in (lat_col, lon_col):
        assert col in df.columns, f"Column {col} not found!"
        assert pd.api.types.is_numeric_dtype(df[col]), f"{col} is not numeric ({df[col].dtype})"
        assert df[col].isnull().sum() == 0, f"Null {col} values found!"
    return f"✓ {lat_col}/{lon_col} are numeric and non-null (n={len(df)})"


def check_coordinate_ranges(df, lat_col='lat', lon_col='long'):
    """Assert latitude within [-90, 90] and longitude within [-180, 180]."""
    bad_lat = (~df[lat_col].between(-90, 90)).sum()
    bad_lon = (~df[lon_col].between(-180, 180)).sum()
    assert bad_lat == 0, f"{bad_lat} {lat_col} values outside [-90, 90]"
    assert bad_lon == 0, f"{bad_lon} {lon_col} values outside [-180, 180]"
    return (
        f"✓ Lat range: {df[lat_col].min():.4f} to {df[lat_col].max():.4f}, "
        f"Lon range: {df[lon_col].min():.4f} to {df[lon_col].max():.4f}"
    )


def check_single_datum(df, datum_col='datum'):
    """Assert all rows share one datum."""
    if datum_col not in df.columns:
        return f"⚠️  {datum_col} column not found"

    datums = df[datum_col].dropna().unique()
    assert len(datums) == 1, f"Expected one datum, found {list(datums)}"
    return f"✓ Datum is {datums[0]}"


def check_crs(gdf, expected_crs='EPSG:4326'):
    """Assert CRS matches expected."""
    assert gdf.crs == expected_crs, f"CRS mismatch: {gdf.crs} != {expected_crs}"
    return f"✓ CRS is {expected_crs}"


def print_qc_report(checks):
    """
    Print formatted QC report.

    Args:
        checks: List of (name, check_func, kwargs) tuples

    Returns:
        Number of failed checks
    """
    print("\n" + "=" * 80)
    print("QUALITY CONTROL REPORT")
    print("=" * 80)

    failures = 0
    for name, check_func, kwargs in checks:
        try:
            result = check_func(**kwargs)
            print(f"\n{name}")
            print(f"  {result}")
        except AssertionError as e:
            failures += 1
            print(f"\n❌ {name}")
            print(f"  ERROR: {e}")
        except Exception as e:
            failures += 1
            print(f"\n⚠️  {name}")
            print(f"  WARNING: {e}")

    print("\n" + "=" * 80)
    return failures
