#!/usr/bin/env python3
"""Reproject the chemistry samples from UTM zone 16N to longitude/latitude.

Outputs:
 - outputs/chemistry_longlat.csv
 - reports/figures/fig_chemistry_longlat.png (samples + monitors, lon/lat axes)

Notes:
 - --csv reads samples from a CSV (sample_id, easting, northing) instead of the built-in table.
"""
import argparse
import sys
from pathlib import Path

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from aqmaps import config, qc
from aqmaps.basemap import save_figure
from aqmaps.io import load_csv, save_csv
from aqmaps.samples import chemistry, monitors
from aqmaps.spatial import reproject_table, points_to_geodataframe


def main():
    print('=' * 80)
    print('UTM ZONE 16 -> LONGITUDE/LATITUDE')
    print('=' * 80)

    ap = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    ap.add_argument('--csv', type=Path, help='Chemistry CSV with sample_id, easting, northing (default: built-in samples)')
    args = ap.parse_args()

    if args.csv is not None:
        try:
            df = load_csv(args.csv, required=['sample_id', 'easting', 'northing'])
        except (FileNotFoundError, ValueError) as e:
            print(f'✗ {e}', file=sys.stderr)
            sys.exit(1)
    else:
        df = chemistry()

    print(f'\nChemistry samples: {len(df)}')
    print(df.to_string(index=False))

    try:
        gdf_ll, log = reproject_table(
            df,
            x_col='easting',
            y_col='northing',
            source_crs=config.UTM16_PROJ4,
            target_crs=config.LONGLAT_PROJ4,
        )
    except Exception as e:
        print(f'✗ Reprojection failed: {e}', file=sys.stderr)
        sys.exit(1)

    config.print_log(log)
    print(qc.check_coordinate_ranges(gdf_ll))

    print('\nReprojected:')
    print(gdf_ll[['sample_id', 'easting', 'northing', 'long', 'lat']].to_string(index=False))

    csv_path = save_csv(gdf_ll, config.OUTPUT_FILES['chemistry_longlat'])
    print(f'\n✓ Saved: {csv_path}')

    gdf_monitors, _ = points_to_geodataframe(monitors())
    fig, ax = plt.subplots(figsize=config.FIGURE_SIZE)
    gdf_ll.plot(ax=ax, color='#1F78B4', markersize=30, marker='^', label='Chemistry samples')
    gdf_monitors.plot(ax=ax, color='#E31A1C', markersize=30, label='Air monitors')
    for _, row in gdf_ll.iterrows():
        ax.text(row['long'], row['lat'], f" {row['sample_id']}", fontsize=7)
    ax.set_xlabel('Longitude')
    ax.set_ylabel('Latitude')
    ax.set_title('Chemistry samples (from UTM 16N) and monitors')
    ax.legend(loc='lower left')

    fig_path = save_figure(fig, config.OUTPUT_FILES['chemistry_longlat_figure'])
    plt.close(fig)
    print(f'✓ Saved: {fig_path}')


if __name__ == '__main__':
    main()
