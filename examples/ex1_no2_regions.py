"""
Map TropOMI NO2 Over Several Regions
====================================

This script reads every TropOMI NO2 file in a folder into one table and
draws tile maps of a few regions. It assumes you have downloaded
S5P_OFFL_L2__NO2____*.nc files into the S5P_NO2 folder.
"""
# %%
# Import Library and Configure
# ----------------------------
import s5pmap

datadir = 'S5P_NO2'
pattern = 'S5P_OFFL_L2__NO2____*.nc'
readername = 'TropOMINO2'  # or TropOMIHCHO, TropOMICO, ...

# %%
# Inspect one file
# ----------------
# Writes the group and variable structure next to the source file.
paths = s5pmap.table.list_product_files(datadir, pattern=pattern)
s5pmap.utils.dump_structure(paths[0])

# %%
# One row per pixel for all files
# -------------------------------
# Values are multiplied by the conversion factor to molecules/cm2. Fill
# values are kept and removed when a region is selected.
df = s5pmap.paths_to_table(paths, reader=readername, qa=True, verbose=1)
print(df.shape[0], 'pixels from', len(paths), 'files')

# %%
# Maps by region
# --------------
# Colors span the 70th to 99.9th percentile of each region.
for regionname in ['europe', 'benelux', 'po_valley']:
    bbox = s5pmap.region_dict[regionname]
    sub = s5pmap.select_region(df, bbox, min_qa=0.75)
    stats = s5pmap.region_stats(sub)
    print(regionname, stats)
    ax = s5pmap.plot_region(sub, bbox, stats=stats, title=regionname)
    ax.figure.savefig(f'{readername}_{regionname}.png')
