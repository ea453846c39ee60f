"""
Sample data: air-quality monitor locations and a water-chemistry table in UTM.
"""

import pandas as pd


# Air-quality monitors, northwest Indiana (lat/long in decimal degrees)
MONITOR_RECORDS = [
    (1, 41.60668, -87.304729, "WGS84", "Gary - IITRI"),
    (2, 41.639444, -87.493611, "WGS84", "Hammond - Purdue Calumet"),
    (3, 41.681376, -87.494713, "WGS84", "Whiting - Center St"),
    (4, 41.616667, -87.199722, "WGS84", "Ogden Dunes - Water Treatment"),
    (5, 41.628611, -87.147222, "WGS84", "Portage - Bethlehem Steel"),
    (6, 41.717439, -86.907761, "WGS84", "Michigan City - 4th St"),
]

MONITOR_COLUMNS = ["id", "lat", "long", "datum", "name"]

# Surface-water chemistry, Grand Calumet River / Burns Waterway
# easting/northing in metres, WGS84 UTM zone 16N
CHEMISTRY_RECORDS = [
    ("GC-01", "Grand Calumet - Cline Ave", 466250.0, 4609180.0, 7.6, 812.0, 94.2),
    ("GC-02", "Grand Calumet - Bridge St", 471930.0, 4607420.0, 7.4, 905.0, 101.5),
    ("GC-03", "Grand Calumet - Broadway", 474610.0, 4606150.0, 7.8, 776.0, 88.1),
    ("GC-04", "Grand Calumet - Grant St", 476880.0, 4605990.0, 7.9, 701.0, 80.3),
    ("BW-01", "Burns Waterway - US 12", 487340.0, 4607960.0, 8.1, 534.0, 41.7),
    ("BW-02", "Burns Waterway - Mouth", 487710.0, 4610220.0, 8.2, 498.0, 38.9),
]

CHEMISTRY_COLUMNS = ["sample_id", "site", "easting", "northing", "ph", "conductivity", "chloride"]


def monitors():
    """
    Return the monitor location table.

    Columns: id, lat, long, datum, name. A new DataFrame is built on every
    call so callers can modify their copy freely.
    """
    df = pd.DataFrame(MONITOR_RECORDS, columns=MONITOR_COLUMNS)
    df["id"] = df["id"].astype("int64")
    return df


def chemistry():
    """Return the water-chemistry table (UTM zone 16N easting/northing)."""
    return pd.DataFrame(CHEMISTRY_RECORDS, columns=CHEMISTRY_COLUMNS)
