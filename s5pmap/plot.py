__all__ = ['get_proj', 'tile_vertices', 'plot_region', 'plot_table']


def get_proj(bbox):
    """
    Equidistant cylindrical projection with true scale at the center
    latitude of bbox, so that tiles keep their shape inside the box.

    Arguments
    ---------
    bbox : str or iterable
        See s5pmap.region.get_region

    Returns
    -------
    proj : pyproj.Proj
    """
    import pyproj
    from .region import get_region

    bbox = get_region(bbox)
    clat, clon = bbox.center
    return pyproj.Proj(
        f'+proj=eqc +lat_ts={clat} +lon_0={clon} +ellps=WGS84 +units=m'
        + ' +no_defs'
    )


def tile_vertices(lon, lat, proj, tile_size=0.05):
    """
    Projected corners of one rectangular tile per pixel center.

    Arguments
    ---------
    lon, lat : array-like
        Pixel centers in decimal degrees East and North
    proj : pyproj.Proj
        Map projection (see get_proj)
    tile_size : float or tuple
        Tile width and height in degrees; a tuple is (dlon, dlat)

    Returns
    -------
    verts : numpy.ndarray
        shape (n, 4, 2) of projected x, y corners
    """
    import numpy as np

    lon = np.asarray(lon, dtype='d')
    lat = np.asarray(lat, dtype='d')
    if np.ndim(tile_size) == 0:
        dlon = dlat = float(tile_size)
    else:
        dlon, dlat = tile_size
    xoff = np.array([-0.5, 0.5, 0.5, -0.5]) * dlon
    yoff = np.array([-0.5, -0.5, 0.5, 0.5]) * dlat
    clon = lon[:, None] + xoff
    clat = np.clip(lat[:, None] + yoff, -90, 90)
    x, y = proj(clon, clat)
    return np.stack([np.asarray(x), np.asarray(y)], axis=-1).reshape(-1, 4, 2)


def plot_region(
    df, bbox, stats=None, ax=None, tile_size=0.05, cmap='viridis',
    coastlines=True, colorbar=True, title=None
):
    """
    Draw one tile per row colored by value over coastlines and country
    borders.

    Arguments
    ---------
    df : pandas.DataFrame
        Rows to draw (usually from s5pmap.region.select_region)
    bbox : str or iterable
        Map extent; see s5pmap.region.get_region
    stats : s5pmap.region.RegionStats or None
        Color limits are stats.low and stats.high; values outside are
        drawn with the limit colors. Defaults to region_stats(df)
    ax : matplotlib.axes.Axes or None
        Axes to draw on; by default a new figure is created
    tile_size : float or tuple
        See tile_vertices
    cmap : str or matplotlib.colors.Colormap
        Colormap for value
    coastlines : bool
        If True, add pycno coastlines and country borders
    colorbar : bool
        If True, add a colorbar
    title : str or None
        Defaults to the varkey in df.attrs

    Returns
    -------
    ax : matplotlib.axes.Axes
    """
    import warnings
    import numpy as np
    import matplotlib.pyplot as plt
    import matplotlib.colors as mc
    import matplotlib.ticker as mt
    from matplotlib.collections import PolyCollection
    from .region import get_region, region_stats

    bbox = get_region(bbox)
    if stats is None:
        stats = region_stats(df)

    proj = get_proj(bbox)
    x0, y0 = proj(bbox.lon_min, bbox.lat_min)
    x1, y1 = proj(bbox.lon_max, bbox.lat_max)

    if ax is None:
        aspect = (y1 - y0) / (x1 - x0)
        fig, ax = plt.subplots(
            figsize=(8, min(max(8 * aspect, 3), 12)), dpi=100
        )

    if stats.count == 0 or df.shape[0] == 0:
        warnings.warn('No valid pixels in region')
    else:
        verts = tile_vertices(
            df['longitude'].values, df['latitude'].values, proj,
            tile_size=tile_size
        )
        norm = mc.Normalize(vmin=stats.low, vmax=stats.high, clip=True)
        tiles = PolyCollection(
            verts, cmap=cmap, norm=norm, edgecolors='none'
        )
        tiles.set_array(df['value'].values)
        ax.add_collection(tiles)
        if colorbar:
            label = df.attrs.get('units', None)
            plt.colorbar(
                tiles, ax=ax, extend='both', label=label,
                orientation='horizontal', pad=0.08
            )

    if coastlines:
        import pycno
        cno = pycno.cno(proj=proj)
        cno.draw(ax=ax)

    ax.set_xlim(x0, x1)
    ax.set_ylim(y0, y1)
    ax.set_aspect('equal')

    clat, clon = bbox.center
    lonticks = [
        v for v in mt.MaxNLocator(6).tick_values(bbox.lon_min, bbox.lon_max)
        if bbox.lon_min <= v <= bbox.lon_max
    ]
    latticks = [
        v for v in mt.MaxNLocator(6).tick_values(bbox.lat_min, bbox.lat_max)
        if bbox.lat_min <= v <= bbox.lat_max
    ]
    ax.set_xticks(proj(lonticks, [clat] * len(lonticks))[0])
    ax.set_xticklabels([f'{v:g}' for v in lonticks])
    ax.set_yticks(proj([clon] * len(latticks), latticks)[1])
    ax.set_yticklabels([f'{v:g}' for v in latticks])
    ax.set_xlabel('longitude (degrees East)')
    ax.set_ylabel('latitude (degrees North)')

    if title is None:
        title = df.attrs.get('varkey', None)
    if title is not None:
        ax.set_title(title)

    return ax


def plot_table(
    df, bbox, outpath=None, overwrite=True, min_qa=None, low=70, high=99.9,
    verbose=0, **kwds
):
    """
    Select a region from a table, scale colors by its percentiles, plot it,
    and optionally save the figure.

    Arguments
    ---------
    df : pandas.DataFrame
        Table from s5pmap.table.paths_to_table
    bbox : str or iterable
        See s5pmap.region.get_region
    outpath : str or None
        If provided, the figure is saved to outpath
    overwrite : bool
        If False and outpath exists, raise IOError
    min_qa : float or None
        See s5pmap.region.select_region
    low, high : float
        Percentiles for color limits
    kwds : mappable
        Passed to plot_region

    Returns
    -------
    ax : matplotlib.axes.Axes
    """
    from .region import select_region, region_stats
    from .utils import check_outpath

    subset = select_region(df, bbox, min_qa=min_qa)
    stats = region_stats(subset, low=low, high=high)
    if verbose > 0:
        print(
            f'{stats.count} pixels; min={stats.min:.6g} max={stats.max:.6g}'
            + f' p{low:g}={stats.low:.6g} p{high:g}={stats.high:.6g}',
            flush=True
        )
    ax = plot_region(subset, bbox, stats=stats, **kwds)
    if outpath is not None:
        check_outpath(outpath, overwrite)
        ax.figure.savefig(outpath)
    return ax
