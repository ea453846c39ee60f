#!/usr/bin/env python3
"""
Quality assurance checks for the sample tables and the reprojection setup.

Scope:
- Monitor table: unique ids, numeric coordinates, coordinate ranges, one datum
- Widget table: "lat:long" strings parse back to the source coordinates
- Reprojection: UTM 16N round trip stays under one metre

This script exits with code 1 if any check fails.
"""

import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from aqmaps import qc
from aqmaps.samples import monitors, chemistry
from aqmaps.spatial import reproject_table, to_utm, from_utm
from aqmaps.widgets import latlong_table, parse_latlong

ROUND_TRIP_TOLERANCE_M = 1.0


def check_latlong_strings(df):
    table = latlong_table(df)
    for value, lat, lon in zip(table['LatLong'], df['lat'], df['long']):
        assert parse_latlong(value) == (lat, lon), f"{value} does not match ({lat}, {lon})"
    return f"✓ {len(table)} lat:long strings match their source coordinates"


def check_utm_round_trip(df):
    worst = 0.0
    for easting, northing in zip(df['easting'], df['northing']):
        lon, lat = from_utm(easting, northing, zone=16)
        e2, n2 = to_utm(lon, lat, zone=16)
        worst = max(worst, abs(e2 - easting), abs(n2 - northing))
    assert worst < ROUND_TRIP_TOLERANCE_M, f"Round trip error {worst:.6f} m"
    return f"✓ UTM 16N round trip max error: {worst:.2e} m"


def main():
    df_monitors = monitors()
    df_chem = chemistry()
    gdf_ll, _ = reproject_table(df_chem)

    checks = [
        ("[1] Monitor ids", qc.check_unique_ids, {'df': df_monitors}),
        ("[2] Monitor coordinates numeric", qc.check_coordinates_numeric, {'df': df_monitors}),
        ("[3] Monitor coordinate ranges", qc.check_coordinate_ranges, {'df': df_monitors}),
        ("[4] Monitor datum", qc.check_single_datum, {'df': df_monitors}),
        ("[5] Widget lat:long strings", check_latlong_strings, {'df': df_monitors}),
        ("[6] Reprojected coordinate ranges", qc.check_coordinate_ranges, {'df': gdf_ll}),
        ("[7] UTM round trip", check_utm_round_trip, {'df': df_chem}),
    ]

    failures = qc.print_qc_report(checks)
    if failures:
        print(f"\n✗ {failures} check(s) failed")
        sys.exit(1)

    print("\n✓ All checks passed")


if __name__ == "__main__":
    main()
