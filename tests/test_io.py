import json
from pathlib import Path

import geopandas as gpd
import pytest

from aqmaps.io import load_csv, save_csv, load_geojson, table_to_geojson, file_size_mb
from aqmaps.spatial import points_to_geodataframe


def test_table_to_geojson_writes_one_feature_per_row(monitors_df, tmp_path):
    path = table_to_geojson(monitors_df, dest=tmp_path)
    assert path == tmp_path / "monitors.geojson"

    data = json.loads(path.read_text(encoding='utf-8'))
    assert data['type'] == 'FeatureCollection'
    assert len(data['features']) == 6
    first = data['features'][0]
    assert first['geometry']['type'] == 'Point'
    assert first['geometry']['coordinates'] == pytest.approx([-87.304729, 41.60668])
    assert first['properties']['name'] == 'Gary - IITRI'
    assert 'lat' not in first['properties']


def test_table_to_geojson_defaults_to_temp_dir(monitors_df):
    path = table_to_geojson(monitors_df, name='sites')
    assert path.exists()
    assert path.name == 'sites.geojson'
    assert file_size_mb(path) > 0


def test_table_to_geojson_missing_coordinates(monitors_df, tmp_path):
    with pytest.raises(ValueError, match="Coordinate columns"):
        table_to_geojson(monitors_df.drop(columns=['long']), dest=tmp_path)


def test_load_geojson(monitors_df, tmp_path):
    gdf = load_geojson(table_to_geojson(monitors_df, dest=tmp_path))
    assert isinstance(gdf, gpd.GeoDataFrame)
    assert gdf.crs == 'EPSG:4326'
    assert len(gdf) == 6


def test_load_missing_files(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_geojson(tmp_path / "nope.geojson")
    with pytest.raises(FileNotFoundError):
        load_csv(tmp_path / "nope.csv")


def test_csv_round_trip_drops_geometry(monitors_df, tmp_path):
    gdf, _ = points_to_geodataframe(monitors_df)
    path = save_csv(gdf, tmp_path / "out" / "monitors.csv")
    df = load_csv(path)
    assert list(df.columns) == ['id', 'lat', 'long', 'datum', 'name']
    assert df['lat'].iloc[0] == pytest.approx(41.60668)
    assert isinstance(path, Path)


def test_load_csv_strips_column_names(tmp_path):
    path = tmp_path / "chem.csv"
    path.write_text("sample_id , easting,northing \nS1,474610,4606155\n", encoding='utf-8')
    df = load_csv(path, required=['sample_id', 'easting', 'northing'])
    assert list(df.columns) == ['sample_id', 'easting', 'northing']
    assert df['easting'].iloc[0] == 474610


def test_load_csv_missing_required_columns(tmp_path):
    path = tmp_path / "chem.csv"
    path.write_text("sample_id,easting\nS1,474610\n", encoding='utf-8')
    with pytest.raises(ValueError, match="northing"):
        load_csv(path, required=['sample_id', 'easting', 'northing'])
