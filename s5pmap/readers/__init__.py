__all__ = [
    'product', 'Granule', 'tropomi', 'reader_dict', 'get_reader',
    'print_reader_list'
]


from .core import product, Granule
from . import tropomi
import inspect

reader_dict = {}
for submod in [tropomi]:
    readers = getattr(submod, '__all__', [])
    for _readerkey in readers:
        _reader = getattr(submod, _readerkey)
        if inspect.isclass(_reader) and issubclass(_reader, product):
            long_name = '.'.join(
                submod.__name__.split('.')[2:] + [_reader.__name__]
            )
            short_name = _reader.__name__
            reader_dict[short_name] = _reader
            reader_dict[long_name] = _reader

reader_dict['TropOMINO2'] = reader_dict['S5P_L2__NO2___']
reader_dict['TropOMIHCHO'] = reader_dict['S5P_L2__HCHO__']
reader_dict['TropOMICO'] = reader_dict['S5P_L2__CO____']
reader_dict['TropOMICH4'] = reader_dict['S5P_L2__CH4___']
reader_dict['TropOMIO3'] = reader_dict['S5P_L2__O3____']
reader_dict['TropOMISO2'] = reader_dict['S5P_L2__SO2___']


def get_reader(reader):
    """
    Return a reader class from a key in reader_dict or pass through a
    product subclass.
    """
    if inspect.isclass(reader) and issubclass(reader, product):
        return reader
    if reader not in reader_dict:
        raise KeyError(
            f'Unknown reader {reader}; use one of ' + ', '.join(reader_dict)
        )
    return reader_dict[reader]


def print_reader_list():
    """
    Print to the screen a short description reader_dict keys and a short
    description of the reader they are associated with.
    """
    for key, reader in reader_dict.items():
        print(f'{key}: ', reader.__doc__)
    print('For more help on any reader, use `help(reader_dict[key])`,')
    print(
        'where key is the reader name. e.g.,'
        + ' help(reader_dict["TropOMINO2"])'
    )
