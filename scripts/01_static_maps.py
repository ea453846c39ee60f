#!/usr/bin/env python3
"""Static maps of the air-quality monitors on state and county outlines.

Outputs (reports/figures/, 300 dpi):
 - fig_monitors_indiana.png           state outline + markers
 - fig_monitors_indiana_labels.png    same, with site labels and a title
 - fig_monitors_great_lakes.png       several states at once
 - fig_monitors_nw_indiana.png        county outlines (Lake, Porter, LaPorte)

Notes:
 - Boundaries come from the US Census cartographic boundary files (network).
 - With --offline, rough bounding boxes replace the downloaded outlines.
"""
import argparse
import sys
from pathlib import Path

import geopandas as gpd
import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
from shapely.geometry import box

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from aqmaps import config, qc
from aqmaps.basemap import load_boundaries, plot_static_map, save_figure
from aqmaps.samples import monitors

# (region key, minx, miny, maxx, maxy)
OFFLINE_BOXES = {
    "state": [
        ("indiana", -88.10, 37.77, -84.78, 41.76),
        ("illinois", -91.51, 36.97, -87.50, 42.51),
        ("michigan", -86.83, 41.70, -82.41, 45.81),
    ],
    "county": [
        ("indiana,lake", -87.53, 41.30, -87.22, 41.76),
        ("indiana,porter", -87.22, 41.05, -86.93, 41.76),
        ("indiana,laporte", -86.93, 41.24, -86.52, 41.76),
    ],
}


def offline_boundaries(level):
    rows = OFFLINE_BOXES[level]
    return gpd.GeoDataFrame(
        {'region': [r[0] for r in rows]},
        geometry=[box(*r[1:]) for r in rows],
        crs=config.CRS_WEB,
    )


def get_boundaries(level, offline):
    if offline:
        print(f'  → Using offline {level} boxes')
        return offline_boundaries(level)
    print(f'  → Loading {level} boundaries: {config.BOUNDARY_SOURCES[level]}')
    return load_boundaries(level)


def main():
    ap = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    ap.add_argument('--offline', action='store_true', help='Use bounding boxes instead of Census boundaries')
    args = ap.parse_args()

    print('=' * 80)
    print('STATIC MAPS')
    print('=' * 80)

    df = monitors()
    print(f'\nMonitors: {len(df)}')
    print(df.to_string(index=False))
    print(f'\n{qc.check_coordinate_ranges(df)}')

    try:
        states = get_boundaries('state', args.offline)
        counties = get_boundaries('county', args.offline)
    except Exception as e:
        print(f'✗ Could not load boundaries: {e}', file=sys.stderr)
        print('  → Re-run with --offline to use bounding boxes', file=sys.stderr)
        sys.exit(1)

    maps = [
        ('fig_monitors_indiana.png', 'indiana', states, {}),
        ('fig_monitors_indiana_labels.png', 'indiana', states,
         {'labels': True, 'title': 'Air-quality monitors, northwest Indiana'}),
        ('fig_monitors_great_lakes.png', ['indiana', 'illinois', 'michigan'], states,
         {'title': 'Indiana, Illinois and Michigan'}),
        ('fig_monitors_nw_indiana.png', ['indiana,lake', 'indiana,porter', 'indiana,laporte'], counties,
         {'labels': True, 'title': 'Lake, Porter and LaPorte counties'}),
    ]

    for filename, regions, boundaries, options in maps:
        print(f'\n[{filename}] regions={regions}')
        fig, _ = plot_static_map(df, regions, boundaries=boundaries, **options)
        out_path = save_figure(fig, config.FIGURES_DIR / filename)
        plt.close(fig)
        print(f'  ✓ Saved: {out_path}')

    print('\n' + '=' * 80)
    print('✓ STATIC MAPS READY')
    print('=' * 80)


if __name__ == '__main__':
    main()
