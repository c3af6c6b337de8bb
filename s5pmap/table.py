__all__ = [
    'list_product_files', 'granule_to_dataframe', 'paths_to_table',
    'directory_to_table'
]


def list_product_files(directory, pattern='*.nc'):
    """
    Arguments
    ---------
    directory : str
        Folder holding product files
    pattern : str
        glob-style file name pattern (e.g., 'S5P_OFFL_L2__NO2*.nc')

    Returns
    -------
    paths : list
        Sorted paths in directory that match pattern
    """
    import os
    from glob import glob

    if not os.path.isdir(directory):
        raise FileNotFoundError(f'{directory} is not a directory')

    return sorted(glob(os.path.join(directory, pattern)))


def granule_to_dataframe(granule, fill_value=None):
    """
    Flatten a Granule to one row per pixel. Rows are ordered scanline-major,
    so latitude, longitude and value stay aligned with the source arrays.

    Arguments
    ---------
    granule : s5pmap.readers.Granule
        Decoded product file
    fill_value : float or None
        Sentinel to write for fill pixels. Defaults to granule.fill_value

    Returns
    -------
    df : pandas.DataFrame
        Columns latitude, longitude, value (and qa_value when the granule
        has qa_values) indexed by scanline and ground_pixel. value is the
        raw value multiplied by granule.scale_factor except for fill pixels.
    """
    import numpy as np
    import pandas as pd

    if fill_value is None:
        fill_value = granule.fill_value

    nscan, npix = granule.shape
    index = pd.MultiIndex.from_product(
        [np.arange(nscan), np.arange(npix)],
        names=['scanline', 'ground_pixel']
    )
    raw = granule.values.ravel()
    if np.isnan(granule.fill_value):
        valid = ~np.isnan(raw)
    else:
        valid = raw != granule.fill_value
    value = np.full(raw.shape, fill_value, dtype='d')
    value[valid] = raw[valid] * granule.scale_factor

    data = dict(
        latitude=granule.latitudes.ravel(),
        longitude=granule.longitudes.ravel(),
        value=value,
    )
    if granule.qa_values is not None:
        data['qa_value'] = granule.qa_values.ravel()

    df = pd.DataFrame(data, index=index)
    df.attrs.update(
        fill_value=fill_value, units=granule.units, varkey=granule.varkey,
        path=granule.path
    )
    return df


def paths_to_table(
    paths, reader='TropOMINO2', varkey=None, qa=False, errors='raise',
    verbose=0, **kwargs
):
    """
    Decode each path and concatenate the flattened results into one table.

    Arguments
    ---------
    paths : iterable
        Product file paths; table rows follow this order
    reader : str or s5pmap.readers.product subclass
        Key from s5pmap.readers.reader_dict (e.g., TropOMINO2)
    varkey : str or None
        Measurement variable; defaults to the reader's default variable
    qa : bool
        If True, add a qa_value column
    errors : str
        'raise' stops at the first file that cannot be decoded. 'skip'
        warns, records the failure in attrs['history'], and continues.
    verbose : int
        Level of progress output
    kwargs : mappable
        Passed to xarray.open_dataset

    Returns
    -------
    table : pandas.DataFrame
        Indexed by path, scanline and ground_pixel. attrs holds fill_value,
        units, varkey, reader, description, history and s5pmap_version.
    """
    import time
    import warnings
    import pandas as pd
    from datetime import datetime
    from .readers import get_reader
    from .utils import rootremover, s5p_version

    if errors not in ('raise', 'skip'):
        raise ValueError(f'errors must be raise or skip; got {errors}')

    paths = list(paths)
    if len(paths) == 0:
        raise ValueError('No paths to process')

    satreader = get_reader(reader)
    dfs = []
    keys = []
    nodata = {}
    fill_value = None
    units = None
    for path in paths:
        if verbose > 0:
            print(path, flush=True)
        if verbose > 1:
            t0 = time.time()
        try:
            granule = satreader.open_granule(
                path, varkey=varkey, qa=qa, **kwargs
            )
        except (OSError, KeyError, ValueError) as e:
            if errors == 'raise':
                raise
            nodata[path] = repr(e)
            warnings.warn(f'Skipping {path}: {nodata[path]}')
            continue

        if fill_value is None:
            fill_value = granule.fill_value
            units = granule.units
            varkey = granule.varkey

        df = granule_to_dataframe(granule, fill_value=fill_value)
        if verbose > 1:
            print(
                f' - {granule.shape} has {df.shape[0]} rows'
                + f' ({time.time() - t0:.1f}s)', flush=True
            )
        dfs.append(df)
        keys.append(path)

    if len(dfs) == 0:
        raise ValueError(f'No paths could be read: {nodata}')

    table = pd.concat(dfs, keys=keys, names=['path'])
    if verbose > 0:
        print(f'Table has {table.shape[0]} rows', flush=True)

    docstr = getattr(satreader, '__doc__', None)
    if docstr is None:
        docstr = ''
    table.attrs = dict(
        fill_value=fill_value, units=units, varkey=varkey,
        reader=satreader.__name__,
        description=(
            docstr + '\n - '.join(rootremover(keys, insert=True)[1])
        ),
        history=str(nodata),
        updated=datetime.now().strftime('%FT%H:%M:%S%z'),
        s5pmap_version=s5p_version(),
    )
    return table


def directory_to_table(directory, pattern='*.nc', verbose=0, **kwargs):
    """
    Thin wrapper around list_product_files and paths_to_table. For
    description of keywords, see those functions.
    """
    paths = list_product_files(directory, pattern=pattern)
    if len(paths) == 0:
        raise ValueError(f'No files matching {pattern} in {directory}')
    if verbose > 0:
        print(f'{len(paths)} files in {directory}', flush=True)
    return paths_to_table(paths, verbose=verbose, **kwargs)
