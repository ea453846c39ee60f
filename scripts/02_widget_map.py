"""
02_widget_map.py
- Combine lat/long into a single "lat:long" location column
- Build the interactive marker widget with site names as tooltips
- Save into reports/maps/widget_map.html
"""

import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from aqmaps import config
from aqmaps.samples import monitors
from aqmaps.widgets import latlong_table, widget_map, render


def main():
    df = monitors()

    table = latlong_table(df, tip_col='name')
    print("Widget table:")
    print(table.to_string(index=False))

    m = widget_map(table, location_var='LatLong', tip_var='Tip',
                   map_type='normal', use_map_type_control=True)
    out_path = render(m, config.OUTPUT_FILES['widget_map'])

    print(f"\n✓ Widget map saved: {out_path.resolve()}")


if __name__ == "__main__":
    main()
