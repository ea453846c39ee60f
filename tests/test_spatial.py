import pytest

from aqmaps import config
from aqmaps.spatial import (
    points_to_geodataframe, utm_crs, reproject_table, transform_point, to_utm, from_utm,
)


def test_points_to_geodataframe(monitors_df):
    gdf, log = points_to_geodataframe(monitors_df)
    assert gdf.crs == config.CRS_WEB
    assert gdf.geometry.x.iloc[0] == pytest.approx(-87.304729)
    assert gdf.geometry.y.iloc[0] == pytest.approx(41.60668)
    assert log[-1].startswith('✓')


def test_points_to_geodataframe_missing_columns(monitors_df):
    with pytest.raises(ValueError):
        points_to_geodataframe(monitors_df, x_col='easting', y_col='northing')


def test_utm_crs():
    assert utm_crs(16).to_epsg() == 32616
    assert utm_crs(16, south=True).to_epsg() == 32716


@pytest.mark.parametrize("zone", [0, 61])
def test_utm_crs_rejects_bad_zone(zone):
    with pytest.raises(ValueError):
        utm_crs(zone)


def test_central_meridian_on_equator():
    lon, lat = from_utm(500000.0, 0.0, zone=16)
    assert lon == pytest.approx(-87.0, abs=1e-9)
    assert lat == pytest.approx(0.0, abs=1e-9)


# Inverse of (474610 E, 4606155 N, zone 16N) computed separately with the
# Krueger series (Karney 2011, 4th order in n) for the WGS84 ellipsoid.
GARY_UTM = (474610.0, 4606155.0)
GARY_LONLAT = (-87.304707999, 41.606700835)


def test_known_point_near_gary():
    lon, lat = from_utm(*GARY_UTM, zone=16)
    assert lon == pytest.approx(GARY_LONLAT[0], abs=1e-6)
    assert lat == pytest.approx(GARY_LONLAT[1], abs=1e-6)


def test_known_point_near_gary_forward():
    easting, northing = to_utm(*GARY_LONLAT, zone=16)
    assert easting == pytest.approx(GARY_UTM[0], abs=0.01)
    assert northing == pytest.approx(GARY_UTM[1], abs=0.01)


def test_round_trip_is_sub_metre(monitors_df):
    for lon, lat in zip(monitors_df['long'], monitors_df['lat']):
        easting, northing = to_utm(lon, lat, zone=16)
        lon2, lat2 = from_utm(easting, northing, zone=16)
        e2, n2 = to_utm(lon2, lat2, zone=16)
        assert abs(e2 - easting) < 1.0
        assert abs(n2 - northing) < 1.0
        assert lon2 == pytest.approx(lon, abs=1e-7)
        assert lat2 == pytest.approx(lat, abs=1e-7)


def test_transform_point_matches_proj_strings():
    lon, lat = transform_point(474610.0, 4606155.0, config.UTM16_PROJ4, config.LONGLAT_PROJ4)
    lon2, lat2 = from_utm(474610.0, 4606155.0, zone=16)
    assert lon == pytest.approx(lon2, abs=1e-9)
    assert lat == pytest.approx(lat2, abs=1e-9)


def test_reproject_table(chemistry_df):
    original = chemistry_df.copy()
    gdf, log = reproject_table(chemistry_df)
    assert len(gdf) == len(chemistry_df)
    assert gdf['lat'].between(41.5, 41.8).all()
    assert gdf['long'].between(-87.5, -87.1).all()
    assert (gdf['long'] == gdf.geometry.x).all()
    assert 'lat' not in chemistry_df.columns
    assert chemistry_df.equals(original)
    assert any('Reprojected 6 points' in line for line in log)
    assert not any('unknown' in line for line in log)
    assert any('+proj=utm +zone=16' in line for line in log)
    assert any('+proj=longlat' in line for line in log)


def test_reproject_table_matches_single_point(chemistry_df):
    gdf, _ = reproject_table(chemistry_df, source_crs=config.CRS_UTM16, target_crs=config.CRS_WEB)
    row = chemistry_df.iloc[2]
    lon, lat = from_utm(row['easting'], row['northing'])
    assert gdf['long'].iloc[2] == pytest.approx(lon, abs=1e-9)
    assert gdf['lat'].iloc[2] == pytest.approx(lat, abs=1e-9)
