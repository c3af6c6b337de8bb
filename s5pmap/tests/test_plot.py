import matplotlib
matplotlib.use('Agg')

from .. import plot  # noqa: E402
from .. import region  # noqa: E402


def example_df():
    import numpy as np
    import pandas as pd

    lat = np.repeat(np.arange(50, 53, 0.25), 16)
    lon = np.tile(np.arange(3, 7, 0.25), 12)
    value = np.linspace(1e15, 2e16, lat.size)
    value[::5] = -999.
    df = pd.DataFrame(dict(latitude=lat, longitude=lon, value=value))
    df.attrs.update(
        fill_value=-999., units='molecules cm**-2',
        varkey='nitrogendioxide_tropospheric_column'
    )
    return df


def test_get_proj():
    import numpy as np

    proj = plot.get_proj('benelux')
    clat, clon = region.region_dict['benelux'].center
    x, y = proj(clon, clat)
    assert (np.isclose(x, 0))
    # true scale at the center latitude: one degree of longitude spans
    # cos(lat) times one degree at the equator
    x1, _ = proj(clon + 1, clat)
    assert (np.isclose(x1 / 111319.49, np.cos(np.radians(clat)), rtol=1e-3))


def test_tile_vertices():
    import numpy as np

    proj = plot.get_proj((-10, 10, -10, 10))
    verts = plot.tile_vertices([0, 1], [0, 1], proj, tile_size=(0.5, 0.25))
    assert (verts.shape == (2, 4, 2))
    lon, lat = proj(verts[0, :, 0], verts[0, :, 1], inverse=True)
    assert (np.allclose(lon, [-0.25, 0.25, 0.25, -0.25]))
    assert (np.allclose(lat, [-0.125, -0.125, 0.125, 0.125]))


def test_plot_region():
    import numpy as np
    import matplotlib.pyplot as plt

    df = example_df()
    bbox = region.get_region('benelux')
    sub = region.select_region(df, bbox)
    stats = region.region_stats(sub)
    ax = plot.plot_region(sub, bbox, stats=stats, coastlines=False)
    tiles, = ax.collections
    assert (len(tiles.get_paths()) == sub.shape[0])
    assert (tiles.norm.vmin == stats.low)
    assert (tiles.norm.vmax == stats.high)
    assert (tiles.norm.clip)
    proj = plot.get_proj(bbox)
    x0, y0 = proj(bbox.lon_min, bbox.lat_min)
    x1, y1 = proj(bbox.lon_max, bbox.lat_max)
    assert (np.allclose(ax.get_xlim(), (x0, x1)))
    assert (np.allclose(ax.get_ylim(), (y0, y1)))
    assert (ax.get_title() == 'nitrogendioxide_tropospheric_column')
    plt.close(ax.figure)


def test_plot_region_empty():
    import warnings
    import matplotlib.pyplot as plt

    df = example_df()
    bbox = region.get_region('eastern_china')
    sub = region.select_region(df, bbox)
    assert (sub.shape[0] == 0)
    with warnings.catch_warnings(record=True) as warning_list:
        warnings.simplefilter('always')
        ax = plot.plot_region(sub, bbox, coastlines=False)
    assert (len(ax.collections) == 0)
    assert (any(['No valid pixels' in str(w.message) for w in warning_list]))
    plt.close(ax.figure)


def test_plot_table():
    import os
    import tempfile
    import pytest
    import matplotlib.pyplot as plt

    df = example_df()
    with tempfile.TemporaryDirectory() as tmpdirname:
        outpath = os.path.join(tmpdirname, 'benelux.png')
        ax = plot.plot_table(
            df, 'benelux', outpath=outpath, coastlines=False, title='NO2'
        )
        assert (os.path.exists(outpath))
        assert (ax.get_title() == 'NO2')
        plt.close(ax.figure)
        with pytest.raises(IOError):
            plot.plot_table(
                df, 'benelux', outpath=outpath, overwrite=False,
                coastlines=False
            )
    plt.close('all')


def test_plot_region_coastlines():
    import numpy as np
    import matplotlib.pyplot as plt
    from matplotlib.collections import LineCollection, PolyCollection

    df = example_df()
    bbox = region.get_region('benelux')
    sub = region.select_region(df, bbox)
    ax = plot.plot_region(sub, bbox, coastlines=True, colorbar=False)
    assert (any([isinstance(c, PolyCollection) for c in ax.collections]))
    assert (any([isinstance(c, LineCollection) for c in ax.collections]))
    # coastlines must not change the map extent
    proj = plot.get_proj(bbox)
    x0, y0 = proj(bbox.lon_min, bbox.lat_min)
    x1, y1 = proj(bbox.lon_max, bbox.lat_max)
    assert (np.allclose(ax.get_xlim(), (x0, x1)))
    assert (np.allclose(ax.get_ylim(), (y0, y1)))
    plt.close(ax.figure)
