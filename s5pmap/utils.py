__all__ = [
    'walk_groups', 'dump_structure', 'rootremover', 's5p_version',
    'check_outpath'
]


def s5p_version():
    from . import __version__ as _s5p_version
    return _s5p_version


def walk_groups(f, gkey, outputs=None):
    if outputs is None:
        outputs = []
    for key in sorted(f.groups.keys()):
        outputs.append(f'{gkey}/{key}')
        walk_groups(f[key], f'{gkey}/{key}', outputs)
    return outputs


def dump_structure(path, outpath=None, overwrite=True):
    """
    Write a plain-text description of every group in a NetCDF4 file. The
    root group is written first, followed by each group in walk_groups
    order (e.g., /PRODUCT, /PRODUCT/SUPPORT_DATA, ...).

    Arguments
    ---------
    path : str
        Path to a NetCDF4 file
    outpath : str or None
        Path for the text output. Defaults to the source path with its
        extension replaced by .txt (i.e., alongside the source file)
    overwrite : bool
        If False and outpath exists, raise IOError

    Returns
    -------
    outpath : str
        Path to the text file
    """
    import os
    import netCDF4

    if outpath is None:
        outpath = os.path.splitext(path)[0] + '.txt'

    check_outpath(outpath, overwrite)

    with netCDF4.Dataset(path, 'r') as f:
        sections = [('/', str(f))]
        for gkey in walk_groups(f, ''):
            sections.append((gkey, str(f[gkey.lstrip('/')])))

    with open(outpath, 'w') as outf:
        for gkey, desc in sections:
            outf.write(f'# {gkey}\n')
            outf.write(desc)
            outf.write('\n\n')

    return outpath


def check_outpath(outpath, overwrite):
    """
    Remove outpath if it exists and overwrite is True; raise IOError if it
    exists and overwrite is False.
    """
    import os

    if os.path.exists(outpath):
        if overwrite:
            os.remove(outpath)
        else:
            raise IOError(f'{outpath} exists; use -O or --overwrite to force')


def rootremover(strlist, insert=False):
    """
    Find the longest common root and replace it with {root}

    Arguments
    ---------
    strlist : list
        List of strings from which to find a common root and replace with
        '{root}'
    insert : bool
        If true, insert f'root: {root}' at the beginning of the short list.

    Return
    ------
    stem, short_list
        List with each element of strlist where the longest common root has
        been removed. If insert, then the root is inserted
    """
    import os

    stem = os.path.dirname(strlist[0])
    while not all([stem in l for l in strlist]):
        oldstem = stem
        stem = os.path.dirname(stem)
        if oldstem == stem:
            short_strlist = strlist
            break
    else:
        if stem == '':
            short_strlist = list(strlist)
        else:
            short_strlist = [
                l.replace(stem, '{root}')
                for l in strlist
            ]
        if insert:
            short_strlist.insert(0, f'root: {stem}')

    return stem, short_strlist
