"""
03_geojson_webmap.py
- Convert the monitor table to GeoJSON in a temporary folder
- Render it as a Leaflet web map (site name + id popups)
- Save into reports/maps/ and optionally open it (--open)
"""

import argparse
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from aqmaps import config
from aqmaps.io import table_to_geojson, file_size_mb
from aqmaps.leaflet import leaflet_map
from aqmaps.samples import monitors


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument('--open', action='store_true', help='Open the map in the default browser')
    ap.add_argument('--base-map', default='osm', choices=sorted(config.LEAFLET_BASE_MAPS))
    args = ap.parse_args()

    geojson_path = table_to_geojson(monitors(), name='monitors')
    print(f"GeoJSON written: {geojson_path} ({file_size_mb(geojson_path) * 1024:.1f} KB)")

    html_path = leaflet_map(
        geojson_path,
        dest=config.MAPS_DIR,
        title='monitors',
        base_map=args.base_map,
        popup=['name', 'id'],
        open_browser=args.open,
    )

    print(f"✓ Leaflet map saved: {html_path.resolve()}")


if __name__ == "__main__":
    main()
