"""
Configuration module: paths, CRS constants, boundary sources and map defaults.
"""

from pathlib import Path
import os

# ============================================================================
# PROJECT PATHS (all relative to PROJECT_ROOT)
# ============================================================================

def get_project_root():
    """Auto-detect project root by checking for aqmaps/ and pyproject.toml."""
    env_root = os.getenv("AQMAPS_PROJECT_ROOT")
    if env_root:
        return Path(env_root).expanduser().resolve()

    cwd = Path.cwd()

    # If already in project root
    if (cwd / "aqmaps").exists() and (cwd / "pyproject.toml").exists():
        return cwd

    # If in scripts/, webmap/ or tests/
    if cwd.name in ["scripts", "webmap", "tests"] and (cwd.parent / "aqmaps").exists():
        return cwd.parent

    # Last resort: the directory holding the package
    return Path(__file__).resolve().parent.parent

PROJECT_ROOT = get_project_root()

DATA_DIR = PROJECT_ROOT / "data"
OUTPUTS_DIR = PROJECT_ROOT / "outputs"
FIGURES_DIR = PROJECT_ROOT / "reports" / "figures"
MAPS_DIR = PROJECT_ROOT / "reports" / "maps"

OUTPUT_FILES = {
    "widget_map": MAPS_DIR / "widget_map.html",
    "chemistry_longlat": OUTPUTS_DIR / "chemistry_longlat.csv",
    "chemistry_longlat_figure": FIGURES_DIR / "fig_chemistry_longlat.png",
}

# ============================================================================
# GEOSPATIAL & CRS CONSTANTS
# ============================================================================

# Geographic lon/lat (WGS84) - monitor table datum and all web outputs
CRS_WEB = "EPSG:4326"

# WGS84 UTM Zone 16N - chemistry sample coordinates (northwest Indiana)
CRS_UTM16 = "EPSG:32616"

# Same two systems written as PROJ strings
UTM16_PROJ4 = "+proj=utm +zone=16 +datum=WGS84 +units=m +no_defs"
LONGLAT_PROJ4 = "+proj=longlat +datum=WGS84 +no_defs"

DEFAULT_DATUM = "WGS84"

# ============================================================================
# BOUNDARY DATABASE (static maps)
# ============================================================================

# US Census cartographic boundary files (1:20,000,000), read directly by geopandas
BOUNDARY_SOURCES = {
    "state": "https://www2.census.gov/geo/tiger/GENZ2018/shp/cb_2018_us_state_20m.zip",
    "county": "https://www2.census.gov/geo/tiger/GENZ2018/shp/cb_2018_us_county_20m.zip",
}

# Two-digit state FIPS -> state name, used to build "state,county" region keys
STATE_FIPS = {
    "01": "alabama", "04": "arizona", "05": "arkansas", "06": "california",
    "08": "colorado", "09": "connecticut", "10": "delaware",
    "11": "district of columbia", "12": "florida", "13": "georgia",
    "16": "idaho", "17": "illinois", "18": "indiana", "19": "iowa",
    "20": "kansas", "21": "kentucky", "22": "louisiana", "23": "maine",
    "24": "maryland", "25": "massachusetts", "26": "michigan",
    "27": "minnesota", "28": "mississippi", "29": "missouri",
    "30": "montana", "31": "nebraska", "32": "nevada",
    "33": "new hampshire", "34": "new jersey", "35": "new mexico",
    "36": "new york", "37": "north carolina", "38": "north dakota",
    "39": "ohio", "40": "oklahoma", "41": "oregon", "42": "pennsylvania",
    "44": "rhode island", "45": "south carolina", "46": "south dakota",
    "47": "tennessee", "48": "texas", "49": "utah", "50": "vermont",
    "51": "virginia", "53": "washington", "54": "west virginia",
    "55": "wisconsin", "56": "wyoming", "02": "alaska", "15": "hawaii",
    "72": "puerto rico",
}

# ============================================================================
# STATIC MAP DEFAULTS
# ============================================================================

BOUNDARY_STYLE = {"facecolor": "none", "edgecolor": "0.3", "linewidth": 0.8}
MARKER_STYLE = {"color": "#E31A1C", "markersize": 30, "marker": "o"}
LABEL_STYLE = {"fontsize": 7, "ha": "left", "va": "bottom"}
LABEL_OFFSET = (0.02, 0.02)  # degrees (dx, dy)
FIGURE_SIZE = (8, 8)
FIGURE_DPI = 300

# ============================================================================
# INTERACTIVE MAP DEFAULTS
# ============================================================================

# Widget map types -> folium tiles
WIDGET_MAP_TYPES = {
    "normal": "OpenStreetMap",
    "terrain": "OpenTopoMap",
    "satellite": "Esri.WorldImagery",
    "hybrid": "Esri.WorldImagery",
}

# Leaflet base maps -> folium tiles
LEAFLET_BASE_MAPS = {
    "osm": "OpenStreetMap",
    "tls": "CartoDB.Positron",
    "topo": "OpenTopoMap",
    "satellite": "Esri.WorldImagery",
}

LEAFLET_POINT_STYLE = {
    "radius": 6,
    "color": "#0033ff",
    "fill": True,
    "fill_color": "#0033ff",
    "fill_opacity": 0.6,
    "weight": 1,
}

# Lake Michigan shoreline, northwest Indiana
MAP_CENTER = (41.63, -87.25)
ZOOM_START = 10

# ============================================================================
# LOGGING & VERBOSITY
# ============================================================================

VERBOSE = True

def print_log(log):
    """Print (result, log) messages when VERBOSE is set."""
    if not VERBOSE:
        return
    for line in log:
        print(line)

def print_config():
    """Print all configuration settings."""
    print("\n" + "=" * 80)
    print("AQMAPS CONFIGURATION")
    print("=" * 80)
    print(f"\n📁 PROJECT ROOT: {PROJECT_ROOT}")
    print(f"📂 OUTPUTS DIR: {OUTPUTS_DIR}")
    print(f"📂 FIGURES DIR: {FIGURES_DIR}")
    print(f"📂 MAPS DIR: {MAPS_DIR}")
    print(f"\n🗺️  CRS Settings:")
    print(f"   Geographic (monitors, web): {CRS_WEB}")
    print(f"   UTM (chemistry samples): {CRS_UTM16}")
    print(f"\n✓ Configuration loaded successfully")
    print("=" * 80 + "\n")
