import matplotlib.pyplot as plt
import pytest

from aqmaps.basemap import load_boundaries, select_regions, plot_static_map, save_figure


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close('all')


def test_load_boundaries_builds_county_keys(boundary_file):
    gdf = load_boundaries('county', source=boundary_file)
    assert set(gdf['region']) == {'indiana,lake', 'indiana,porter', 'indiana,laporte', 'illinois,cook'}


def test_load_boundaries_unknown_level():
    with pytest.raises(ValueError, match="Unknown boundary level"):
        load_boundaries('nation')


def test_select_single_state(state_boundaries):
    selected = select_regions(state_boundaries, 'Indiana')
    assert list(selected['NAME']) == ['Indiana']


def test_select_state_list(state_boundaries):
    selected = select_regions(state_boundaries, ['indiana', 'michigan'])
    assert sorted(selected['NAME']) == ['Indiana', 'Michigan']


def test_select_all_counties_of_state(county_boundaries):
    selected = select_regions(county_boundaries, 'indiana')
    assert set(selected['NAME']) == {'Lake', 'LaPorte', 'Porter'}


def test_select_one_county(county_boundaries):
    selected = select_regions(county_boundaries, 'indiana,lake')
    assert list(selected['NAME']) == ['Lake']


def test_select_partially_unknown_warns(state_boundaries):
    with pytest.warns(UserWarning, match="atlantis"):
        selected = select_regions(state_boundaries, ['indiana', 'atlantis'])
    assert len(selected) == 1


def test_select_unknown_region(state_boundaries):
    with pytest.raises(ValueError, match="nothing to draw"):
        select_regions(state_boundaries, 'atlantis')


def test_plot_static_map_markers_only(monitors_df, state_boundaries):
    fig, ax = plot_static_map(monitors_df, 'indiana', boundaries=state_boundaries)
    assert len(ax.collections) == 2
    assert len(ax.texts) == 0
    assert ax.get_title() == ''
    assert not ax.axison


def test_plot_static_map_labels_and_title(monitors_df, state_boundaries):
    fig, ax = plot_static_map(
        monitors_df, 'indiana', boundaries=state_boundaries, labels=True, title='Monitors'
    )
    assert ax.get_title() == 'Monitors'
    assert sorted(t.get_text() for t in ax.texts) == sorted(monitors_df['name'])


def test_plot_static_map_on_existing_axes(monitors_df, county_boundaries):
    fig, ax = plt.subplots()
    fig2, ax2 = plot_static_map(
        monitors_df, ['indiana,lake', 'indiana,porter'], boundaries=county_boundaries, ax=ax, axes=True
    )
    assert fig2 is fig and ax2 is ax
    assert ax.get_xlabel() == 'Longitude'


def test_plot_static_map_bad_label_column(monitors_df, state_boundaries):
    with pytest.raises(ValueError, match="Label column"):
        plot_static_map(monitors_df, 'indiana', boundaries=state_boundaries, labels=True, label_col='site')


def test_plot_static_map_bad_region(monitors_df, state_boundaries):
    with pytest.raises(ValueError, match="nothing to draw"):
        plot_static_map(monitors_df, 'ohio', boundaries=state_boundaries)


def test_save_figure(monitors_df, state_boundaries, tmp_path):
    fig, _ = plot_static_map(monitors_df, 'indiana', boundaries=state_boundaries)
    path = save_figure(fig, tmp_path / "figs" / "map.png", dpi=50)
    assert path.exists()
    assert path.stat().st_size > 0
