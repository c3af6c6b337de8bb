from .. import readers
from .. import region


def localdisk_dump(inpath, outpath, overwrite):
    """
    Write the structure of a product file to a text file.

    Arguments
    ---------
    inpath : str
        Product file on disk
    outpath : str or None
        path to write out result; If None, inpath with a .txt extension
    overwrite : bool
        Overwrite existing files?

    Results
    -------
    None :
        Outputs are written to disk.
    """
    from ..utils import dump_structure

    dump_structure(inpath, outpath=outpath, overwrite=overwrite)


def localdisk_table(
    directory, pattern, reader, variable, qa, skip_errors, outpath,
    overwrite, verbose
):
    """
    Write the aggregate table of all files in directory to a csv file.

    Arguments
    ---------
    directory : str
        Folder with product files
    pattern : str
        glob pattern for product files
    reader : str
        Key for any product reader (e.g., 'TropOMINO2'). See
        s5pmap.readers.reader_dict for options.
    variable : str or None
        Measurement variable; None uses the reader default
    qa : bool
        Add a qa_value column?
    skip_errors : bool
        Skip files that cannot be read instead of stopping
    outpath : str
        path to write out result; If None, default {reader}_{variable}.csv
    overwrite : bool
        Overwrite existing files?
    verbose : int
        Level of progress output

    Results
    -------
    None :
        Outputs are written to disk.
    """
    from ..table import directory_to_table
    from ..utils import check_outpath

    satreader = readers.get_reader(reader)
    if variable is None:
        variable = satreader._defaultkey

    if outpath is None:
        outpath = f'{reader}_{variable}.csv'

    check_outpath(outpath, overwrite)

    df = directory_to_table(
        directory, pattern=pattern, reader=satreader, varkey=variable, qa=qa,
        errors='skip' if skip_errors else 'raise', verbose=verbose
    )
    df.to_csv(outpath)


def localdisk_plot(
    directory, pattern, reader, variable, regionname, bbox, min_qa,
    tile_size, cmap, skip_errors, outpath, overwrite, verbose
):
    """
    Save a tile map of one region using all files in directory.

    Arguments
    ---------
    directory, pattern, reader, variable, skip_errors, verbose :
        See localdisk_table
    regionname : str
        Key from s5pmap.region.region_dict; ignored if bbox is provided
    bbox : list or None
        lat_min, lat_max, lon_min, lon_max
    min_qa : float or None
        If provided, only pixels with qa_value > min_qa are drawn
    tile_size : float
        Tile width and height in degrees
    cmap : str
        matplotlib colormap name
    outpath : str
        path to write out result; If None, default {reader}_{region}.png
    overwrite : bool
        Overwrite existing files?

    Results
    -------
    None :
        Outputs are written to disk.
    """
    import matplotlib
    matplotlib.use('Agg')
    from ..table import directory_to_table
    from ..plot import plot_table
    from ..utils import check_outpath

    if bbox is None:
        bbox = region.get_region(regionname)
        outname = regionname
    else:
        bbox = region.get_region(bbox)
        outname = '_'.join([f'{v:g}' for v in bbox])

    if outpath is None:
        outpath = f'{reader}_{outname}.png'

    check_outpath(outpath, overwrite)

    df = directory_to_table(
        directory, pattern=pattern, reader=reader, varkey=variable,
        qa=min_qa is not None, errors='skip' if skip_errors else 'raise',
        verbose=verbose
    )
    plot_table(
        df, bbox, outpath=outpath, min_qa=min_qa, tile_size=tile_size,
        cmap=cmap, verbose=verbose
    )


def _add_common_arguments(parser):
    parser.add_argument(
        '-O', '--overwrite', default=False, action='store_true',
        help='--outpath will be removed before running the command'
    )
    parser.add_argument(
        '--outpath', default=None,
        help='Defaults to {reader}_{variable}.csv or {reader}_{region}.png'
    )
    parser.add_argument(
        '--pattern', default='*.nc',
        help='glob pattern for product files in DIRECTORY (default *.nc)'
    )
    parser.add_argument(
        '--reader', default='TropOMINO2', choices=tuple(readers.reader_dict),
        metavar='READER',
        help='Choose a reader from ' + ', '.join(readers.reader_dict.keys())
    )
    parser.add_argument(
        '--variable', default=None,
        help='Measurement variable; defaults to the reader default'
    )
    parser.add_argument(
        '--skip-errors', default=False, action='store_true',
        help='Skip files that cannot be read instead of stopping'
    )
    parser.add_argument(
        '-v', '--verbose', default=0, action='count',
        help='Increase progress output'
    )
    parser.add_argument(
        'directory', metavar='DIRECTORY',
        help='Folder with product files'
    )


def add_localdisk_parser(subparsers):
    dumpparser = subparsers.add_parser(
        'dump',
        help='Write the group/variable structure of a file to a text file.'
    )
    dumpparser.add_argument(
        '-O', '--overwrite', default=False, action='store_true',
        help='--outpath will be removed before running the command'
    )
    dumpparser.add_argument(
        '--outpath', default=None,
        help='Defaults to INPATH with a .txt extension'
    )
    dumpparser.add_argument('inpath', metavar='INPATH', help='Product file')

    tableparser = subparsers.add_parser(
        'table',
        help='Write one csv row per pixel for all files in DIRECTORY.'
    )
    _add_common_arguments(tableparser)
    tableparser.add_argument(
        '--qa', default=False, action='store_true',
        help='Include the qa_value column'
    )

    plotparser = subparsers.add_parser(
        'plot',
        help='Save a tile map of a region for all files in DIRECTORY.'
    )
    _add_common_arguments(plotparser)
    plotparser.add_argument(
        '--region', dest='regionname', default='europe',
        choices=tuple(region.region_dict),
        help='Named region (default europe); ignored when --bbox is used'
    )
    plotparser.add_argument(
        '--bbox', default=None, nargs=4, type=float,
        metavar=('LAT_MIN', 'LAT_MAX', 'LON_MIN', 'LON_MAX'),
        help='Custom region in decimal degrees'
    )
    plotparser.add_argument(
        '--min-qa', default=None, type=float,
        help='Only draw pixels with qa_value greater than MIN_QA'
    )
    plotparser.add_argument(
        '--tile-size', default=0.05, type=float,
        help='Tile width and height in degrees (default 0.05)'
    )
    plotparser.add_argument(
        '--cmap', default='viridis', help='matplotlib colormap'
    )
