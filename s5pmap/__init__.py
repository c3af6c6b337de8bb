__all__ = [
    'utils', 'readers', 'table', 'region', 'plot', 'drivers', 'reader_dict',
    'region_dict', 'print_reader_list', 'directory_to_table',
    'paths_to_table', 'select_region', 'region_stats', 'plot_region',
    'plot_table', 'BoundingBox'
]

__doc__ = """
Overview
========

s5pmap reads Sentinel-5P TropOMI Level 2 products and makes maps of
selected regions. This has four basic steps:
  1. List product files in a directory,
  2. decode one variable with its latitude and longitude from each file,
     applying the unit conversion factor,
  3. flatten each file to one row per pixel and concatenate the rows into
     one table, and
  4. select a bounding box, scale colors by percentiles, and draw tiles
     over coastlines.

Core Objects
============

  * reader_dict : dictionary of product readers.
  * directory_to_table : decode all files in a directory into a table.
  * select_region : subset the table by bounding box and fill value.
  * region_stats : min, max and percentiles for color scaling.
  * plot_region : draw the map.

By TropOMI NO2 Example
======================

    # Import Libraries
    import s5pmap

    # One row per pixel for all files in the folder
    df = s5pmap.directory_to_table(
        'S5P_NO2', pattern='S5P_OFFL_L2__NO2____*.nc', reader='TropOMINO2',
        verbose=1
    )

    # lat_min, lat_max, lon_min, lon_max (or a key from region_dict)
    bbox = (49.4, 53.6, 2.5, 7.3)
    sub = s5pmap.select_region(df, bbox)
    stats = s5pmap.region_stats(sub)
    ax = s5pmap.plot_region(sub, bbox, stats=stats)
    ax.figure.savefig('NO2_benelux.png')

"""

from . import utils
from . import readers
from . import table
from . import region
from . import plot
from . import drivers

__version__ = '0.1.0'

reader_dict = readers.reader_dict
region_dict = region.region_dict
print_reader_list = readers.print_reader_list
directory_to_table = table.directory_to_table
paths_to_table = table.paths_to_table
select_region = region.select_region
region_stats = region.region_stats
BoundingBox = region.BoundingBox
plot_region = plot.plot_region
plot_table = plot.plot_table
