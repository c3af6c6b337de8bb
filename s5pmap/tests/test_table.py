from .. import table
from .. import readers
from .synthetic import product_dataset, write_product, grid2x2, FILL


def write_two(tmpdirname):
    import os
    path1 = write_product(
        os.path.join(tmpdirname, 'S5P_NO2_1.nc'),
        grid2x2(10, 20, [[1, 2], [3, 4]])
    )
    path2 = write_product(
        os.path.join(tmpdirname, 'S5P_NO2_2.nc'),
        grid2x2(30, 40, [[5, 6], [7, 8]])
    )
    return [path1, path2]


def test_list_product_files():
    import os
    import tempfile
    import pytest

    with tempfile.TemporaryDirectory() as tmpdirname:
        paths = write_two(tmpdirname)
        with open(os.path.join(tmpdirname, 'notes.txt'), 'w') as outf:
            outf.write('not a product')
        found = table.list_product_files(tmpdirname)
        assert (found == sorted(paths))
        found = table.list_product_files(tmpdirname, pattern='*_2.nc')
        assert (found == paths[1:])
        assert (table.list_product_files(tmpdirname, pattern='*.he5') == [])

    with pytest.raises(FileNotFoundError):
        table.list_product_files('/no/such/directory')


def test_granule_to_dataframe():
    import numpy as np

    values = np.arange(12, dtype='f').reshape(3, 4)
    values[1, 2] = FILL
    lat = np.arange(12).reshape(3, 4) + 100
    lon = np.arange(12).reshape(3, 4) + 200
    ds = product_dataset(values, lat, lon, scale_factor=0.5)
    ds['nitrogendioxide_tropospheric_column'].attrs['_FillValue'] = (
        np.float32(FILL)
    )
    granule = readers.reader_dict['TropOMINO2'].from_dataset(ds)
    df = table.granule_to_dataframe(granule)
    assert (df.shape[0] == 3 * 4)
    assert (list(df.index.names) == ['scanline', 'ground_pixel'])
    assert (np.allclose(df['latitude'].values, lat.ravel()))
    assert (np.allclose(df['longitude'].values, lon.ravel()))
    # index, latitude, longitude and value refer to the same pixel
    row = df.loc[(2, 1)]
    assert (row['latitude'] == lat[2, 1])
    assert (row['longitude'] == lon[2, 1])
    assert (row['value'] == values[2, 1] * 0.5)
    assert (df.loc[(1, 2), 'value'] == granule.fill_value)
    assert (df.attrs['fill_value'] == granule.fill_value)


def test_paths_to_table():
    import tempfile
    import numpy as np

    with tempfile.TemporaryDirectory() as tmpdirname:
        paths = write_two(tmpdirname)
        df = table.paths_to_table(paths)

    assert (df.shape[0] == 8)
    assert (list(df.index.names) == ['path', 'scanline', 'ground_pixel'])
    assert (list(df.index.get_level_values('path').unique()) == paths)
    assert (np.allclose(df['value'].values, np.arange(1, 9) * 2.0))
    assert (np.allclose(
        df['latitude'].values, [10, 10, 11, 11, 30, 30, 31, 31]
    ))
    assert (np.allclose(
        df['longitude'].values, [20, 21, 20, 21, 40, 41, 40, 41]
    ))
    assert (df.attrs['reader'] == 'S5P_L2__NO2___')
    assert (df.attrs['history'] == '{}')
    assert (abs(df.attrs['fill_value'] / FILL - 1) < 1e-6)


def test_directory_to_table():
    import os
    import tempfile
    import pytest

    with tempfile.TemporaryDirectory() as tmpdirname:
        write_two(tmpdirname)
        df = table.directory_to_table(tmpdirname, verbose=2)
        assert (df.shape[0] == 8)
        with pytest.raises(ValueError):
            table.directory_to_table(tmpdirname, pattern='*.he5')
        emptydir = os.path.join(tmpdirname, 'empty')
        os.mkdir(emptydir)
        with pytest.raises(ValueError):
            table.directory_to_table(emptydir)


def test_fill_value_harmonized():
    import os
    import tempfile
    import numpy as np

    with tempfile.TemporaryDirectory() as tmpdirname:
        path1 = write_product(
            os.path.join(tmpdirname, 'a.nc'),
            grid2x2(10, 20, [[1, FILL], [3, 4]])
        )
        path2 = write_product(
            os.path.join(tmpdirname, 'b.nc'),
            grid2x2(10, 20, [[-999, 6], [7, 8]]), fill_value=-999
        )
        df = table.paths_to_table([path1, path2])

    fill_value = df.attrs['fill_value']
    isfill = (df['value'] == fill_value).values
    assert (isfill.tolist() == [
        False, True, False, False, True, False, False, False
    ])
    assert (np.allclose(df['value'].values[~isfill], [2, 6, 8, 12, 14, 16]))


def test_errors():
    import os
    import tempfile
    import warnings
    import pytest

    with tempfile.TemporaryDirectory() as tmpdirname:
        paths = write_two(tmpdirname)
        badpath = os.path.join(tmpdirname, 'S5P_NO2_0.nc')
        write_product(
            badpath, grid2x2(0, 0, [[1, 2], [3, 4]]).rename(
                nitrogendioxide_tropospheric_column='other'
            ), varkey='other'
        )
        allpaths = [badpath] + paths
        with pytest.raises(KeyError):
            table.paths_to_table(allpaths)
        with pytest.raises(ValueError):
            table.paths_to_table(allpaths, errors='ignore')
        with warnings.catch_warnings(record=True) as warning_list:
            warnings.simplefilter('always')
            df = table.paths_to_table(allpaths, errors='skip')
        skipped = [
            w for w in warning_list if 'Skipping' in str(w.message)
        ]
        assert (len(skipped) == 1)
        assert (df.shape[0] == 8)
        assert (badpath in df.attrs['history'])
        with pytest.raises(ValueError):
            table.paths_to_table([badpath], errors='skip')


def test_qa_column():
    import os
    import tempfile

    ds = product_dataset(
        [[1, 2], [3, 4]], [[0, 0], [1, 1]], [[0, 1], [0, 1]],
        qa=[[0.2, 0.9], [0.9, 0.2]]
    )
    with tempfile.TemporaryDirectory() as tmpdirname:
        path = write_product(os.path.join(tmpdirname, 'qa.nc'), ds)
        df = table.paths_to_table([path], qa=True)
    assert ('qa_value' in df.columns)
    assert ((df['qa_value'] > 0.5).tolist() == [False, True, True, False])
