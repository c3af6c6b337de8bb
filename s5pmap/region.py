__all__ = [
    'BoundingBox', 'RegionStats', 'region_dict', 'get_region',
    'select_region', 'region_stats'
]

from collections import namedtuple


_BoundingBox = namedtuple(
    '_BoundingBox', ['lat_min', 'lat_max', 'lon_min', 'lon_max']
)

RegionStats = namedtuple('RegionStats', ['min', 'max', 'low', 'high', 'count'])


class BoundingBox(_BoundingBox):
    """
    Latitude/longitude rectangle in decimal degrees North and East. Note
    the order: lat_min, lat_max, lon_min, lon_max.
    """
    __slots__ = ()

    def __new__(cls, lat_min, lat_max, lon_min, lon_max):
        lat_min, lat_max, lon_min, lon_max = [
            float(v) for v in (lat_min, lat_max, lon_min, lon_max)
        ]
        if lat_min >= lat_max:
            raise ValueError(f'lat_min ({lat_min}) >= lat_max ({lat_max})')
        if lon_min >= lon_max:
            raise ValueError(f'lon_min ({lon_min}) >= lon_max ({lon_max})')
        return super().__new__(cls, lat_min, lat_max, lon_min, lon_max)

    @property
    def center(self):
        """(latitude, longitude) of the box center"""
        return (
            (self.lat_min + self.lat_max) / 2,
            (self.lon_min + self.lon_max) / 2
        )

    def contains(self, lat, lon):
        """
        True where lat and lon are strictly inside the box. Works on scalars,
        numpy arrays and pandas.Series.
        """
        return (
            (lat > self.lat_min) & (lat < self.lat_max)
            & (lon > self.lon_min) & (lon < self.lon_max)
        )


# Regions used for the maps; values are lat_min, lat_max, lon_min, lon_max
region_dict = {
    'world': BoundingBox(-90, 90, -180, 180),
    'europe': BoundingBox(35, 70, -12, 35),
    'benelux': BoundingBox(49.4, 53.6, 2.5, 7.3),
    'po_valley': BoundingBox(44, 46.5, 7, 13),
    'eastern_china': BoundingBox(20, 42, 108, 123),
    'eastern_us': BoundingBox(25, 50, -95, -65),
    'south_africa_highveld': BoundingBox(-28, -24, 27, 31),
}


def get_region(region):
    """
    Arguments
    ---------
    region : str or iterable
        Key from region_dict or lat_min, lat_max, lon_min, lon_max

    Returns
    -------
    bbox : BoundingBox
    """
    if isinstance(region, BoundingBox):
        return region
    if isinstance(region, str):
        if region not in region_dict:
            raise KeyError(
                f'Unknown region {region}; use one of '
                + ', '.join(region_dict)
            )
        return region_dict[region]
    return BoundingBox(*region)


def _isfill(values, fill_value):
    import numpy as np
    if np.isnan(fill_value):
        return values.isnull()
    return values == fill_value


def select_region(df, bbox, fill_value=None, min_qa=None):
    """
    Select rows strictly inside bbox whose value is not the fill sentinel.
    Applying the same selection to the result returns the same rows.

    Arguments
    ---------
    df : pandas.DataFrame
        Table with latitude, longitude and value columns (see
        s5pmap.table.paths_to_table)
    bbox : str or iterable
        See get_region
    fill_value : float or None
        Defaults to df.attrs['fill_value']
    min_qa : float or None
        If provided, also require qa_value > min_qa

    Returns
    -------
    subset : pandas.DataFrame
        Copy of the selected rows with df.attrs
    """
    bbox = get_region(bbox)
    if fill_value is None:
        if 'fill_value' not in df.attrs:
            raise KeyError('fill_value not in df.attrs; supply fill_value')
        fill_value = df.attrs['fill_value']

    keep = (
        bbox.contains(df['latitude'], df['longitude'])
        & ~_isfill(df['value'], fill_value)
    )
    if min_qa is not None:
        if 'qa_value' not in df.columns:
            raise KeyError('min_qa requires a qa_value column; use qa=True')
        keep = keep & (df['qa_value'] > min_qa)

    subset = df.loc[keep].copy()
    subset.attrs = dict(df.attrs)
    subset.attrs['fill_value'] = fill_value
    return subset


def region_stats(values, fill_value=None, low=70, high=99.9):
    """
    Summary statistics used to scale region maps. NaN and fill values are
    ignored. Percentiles use numpy.percentile (linear interpolation).

    Arguments
    ---------
    values : pandas.DataFrame, pandas.Series or array-like
        If a DataFrame, the value column is used and fill_value defaults to
        values.attrs['fill_value']
    fill_value : float or None
        Sentinel to ignore
    low, high : float
        Percentiles (0-100) for the lower and upper color limits

    Returns
    -------
    stats : RegionStats
        min, max, low, high and count of values used. With no values, all
        statistics are NaN and count is 0.
    """
    import numpy as np
    import pandas as pd

    if isinstance(values, pd.DataFrame):
        if fill_value is None:
            fill_value = values.attrs.get('fill_value', None)
        values = values['value']

    values = np.asarray(values, dtype='d').ravel()
    keep = ~np.isnan(values)
    if fill_value is not None and not np.isnan(fill_value):
        keep &= values != fill_value
    values = values[keep]

    if values.size == 0:
        return RegionStats(np.nan, np.nan, np.nan, np.nan, 0)

    return RegionStats(
        float(values.min()), float(values.max()),
        float(np.percentile(values, low)), float(np.percentile(values, high)),
        int(values.size)
    )
