__all__ = [
    'TropOMI', 'S5P_L2__NO2___', 'S5P_L2__HCHO__', 'S5P_L2__CO____',
    'S5P_L2__CH4___', 'S5P_L2__O3____', 'S5P_L2__SO2___'
]
from ..core import product


class TropOMI(product):
    __doc__ = """
    Default TropOMI product reader.
    * data, latitude and longitude are read from the PRODUCT group
    * values are multiplied by the variable's
      multiplication_factor_to_convert_to_molecules_percm2
    * qa_value is the quality indicator
    """
    _datagrp = 'PRODUCT'
    _latkey = 'latitude'
    _lonkey = 'longitude'
    _qakey = 'qa_value'
    _scalekey = 'multiplication_factor_to_convert_to_molecules_percm2'
    _units = 'molecules cm**-2'


class S5P_L2__NO2___(TropOMI):
    __doc__ = """
    TropOMINO2 product reader.
    * default variable nitrogendioxide_tropospheric_column
    """
    _defaultkey = 'nitrogendioxide_tropospheric_column'


class S5P_L2__HCHO__(TropOMI):
    __doc__ = """
    TropOMIHCHO product reader.
    * default variable formaldehyde_tropospheric_vertical_column
    """
    _defaultkey = 'formaldehyde_tropospheric_vertical_column'


class S5P_L2__CO____(TropOMI):
    __doc__ = """
    TropOMICO product reader.
    * default variable carbonmonoxide_total_column
    """
    _defaultkey = 'carbonmonoxide_total_column'


class S5P_L2__CH4___(TropOMI):
    __doc__ = """
    TropOMICH4 product reader.
    * default variable methane_mixing_ratio
    * values are dry air mole fractions and are not converted
    """
    _defaultkey = 'methane_mixing_ratio'
    _scalekey = None
    _units = None


class S5P_L2__O3____(TropOMI):
    __doc__ = """
    TropOMIO3 product reader.
    * default variable ozone_total_vertical_column
    """
    _defaultkey = 'ozone_total_vertical_column'


class S5P_L2__SO2___(TropOMI):
    __doc__ = """
    TropOMISO2 product reader.
    * default variable sulfurdioxide_total_vertical_column
    """
    _defaultkey = 'sulfurdioxide_total_vertical_column'
