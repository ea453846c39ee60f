import matplotlib
matplotlib.use("Agg")

import geopandas as gpd
import pytest
from shapely.geometry import box

from aqmaps import config
from aqmaps.samples import monitors, chemistry


@pytest.fixture
def monitors_df():
    return monitors()


@pytest.fixture
def chemistry_df():
    return chemistry()


@pytest.fixture
def state_boundaries():
    return gpd.GeoDataFrame(
        {'NAME': ['Indiana', 'Illinois', 'Michigan']},
        geometry=[
            box(-88.10, 37.77, -84.78, 41.76),
            box(-91.51, 36.97, -87.50, 42.51),
            box(-86.83, 41.70, -82.41, 45.81),
        ],
        crs=config.CRS_WEB,
    )


@pytest.fixture
def county_boundaries():
    return gpd.GeoDataFrame(
        {
            'STATEFP': ['18', '18', '18', '17'],
            'COUNTYFP': ['089', '127', '091', '031'],
            'NAME': ['Lake', 'Porter', 'LaPorte', 'Cook'],
        },
        geometry=[
            box(-87.53, 41.30, -87.22, 41.76),
            box(-87.22, 41.05, -86.93, 41.76),
            box(-86.93, 41.24, -86.52, 41.76),
            box(-88.26, 41.47, -87.52, 42.15),
        ],
        crs=config.CRS_WEB,
    )


@pytest.fixture
def boundary_file(tmp_path, county_boundaries):
    path = tmp_path / "counties.geojson"
    county_boundaries.to_file(path, driver="GeoJSON")
    return path
