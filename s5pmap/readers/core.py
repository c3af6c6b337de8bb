__all__ = ['product', 'Granule']


class Granule:
    """
    Decoded contents of a single product file (one satellite pass).

    Attributes
    ----------
    values : numpy.ndarray
        2D (scanline, ground_pixel) raw measurement values; fill pixels hold
        fill_value
    latitudes, longitudes : numpy.ndarray
        2D pixel centers in decimal degrees North and East; same shape as
        values
    scale_factor : float
        Multiplicative unit conversion factor for values
    fill_value : float
        Sentinel marking invalid pixels in values
    path : str
        Source of the data
    varkey : str
        Name of the measurement variable
    units : str or None
        Units of values after applying scale_factor
    qa_values : numpy.ndarray or None
        Optional 2D quality indicator with the same shape as values
    """
    def __init__(
        self, values, latitudes, longitudes, scale_factor, fill_value,
        path='unknown', varkey=None, units=None, qa_values=None
    ):
        self.values = values
        self.latitudes = latitudes
        self.longitudes = longitudes
        self.scale_factor = scale_factor
        self.fill_value = fill_value
        self.path = path
        self.varkey = varkey
        self.units = units
        self.qa_values = qa_values

    @property
    def shape(self):
        return self.values.shape

    @property
    def size(self):
        return self.values.size

    def __repr__(self):
        return (
            f'Granule({self.varkey}, shape={self.shape},'
            + f' scale_factor={self.scale_factor},'
            + f' fill_value={self.fill_value}, path={self.path})'
        )


class product:
    _datagrp = 'PRODUCT'
    _defaultkey = None
    _latkey = 'latitude'
    _lonkey = 'longitude'
    _scalekey = None
    _qakey = None
    _timedim = 'time'
    _units = None

    @classmethod
    def open_group(cls, path, group=None, **kwargs):
        """
        Open one group of a product file without masking or scaling, so that
        fill values and conversion attributes are preserved as stored.

        Arguments
        ---------
        path : str
            Path to a product file
        group : str or None
            Group to open. None uses cls._datagrp; use '/' for the root group
        kwargs : mappable
            Passed to xarray.open_dataset

        Returns
        -------
        ds : xarray.Dataset
        """
        import os
        import xarray as xr

        if not os.path.exists(path):
            raise FileNotFoundError(f'{path} does not exist')
        if group is None:
            group = cls._datagrp
        if group in ('', '/'):
            group = None
        kwargs.setdefault('mask_and_scale', False)
        kwargs.setdefault('decode_coords', False)
        kwargs.setdefault('decode_times', False)
        return xr.open_dataset(path, group=group, **kwargs)

    @classmethod
    def _as2d(cls, var, path):
        """
        Drop the length-1 time dimension that TropOMI products carry and
        require a 2D (scanline, ground_pixel) result.
        """
        if cls._timedim in var.dims:
            if var.sizes[cls._timedim] != 1:
                raise ValueError(
                    f'{path}:{var.name} has {var.sizes[cls._timedim]} times;'
                    + ' expected 1'
                )
            var = var.isel(**{cls._timedim: 0})
        if var.ndim != 2:
            raise ValueError(
                f'{path}:{var.name} has dims {var.dims}; expected 2D'
            )
        return var

    @classmethod
    def from_dataset(cls, ds, varkey=None, qa=False, path='unknown'):
        """
        Create a Granule from a dataset that has not been masked or scaled.

        Arguments
        ---------
        ds : xarray.Dataset
            Data group of a product
        varkey : str or None
            Measurement variable. Defaults to cls._defaultkey
        qa : bool
            If True, also read cls._qakey as qa_values
        path : str
            Used in messages and stored on the Granule

        Returns
        -------
        granule : Granule
        """
        import numpy as np

        if varkey is None:
            varkey = cls._defaultkey
        if varkey is None:
            raise KeyError(
                f'{cls.__name__} has no default variable; use varkey'
            )
        keys = [varkey, cls._latkey, cls._lonkey]
        if qa:
            if cls._qakey is None:
                raise KeyError(f'{cls.__name__} has no quality variable')
            keys.append(cls._qakey)
        for key in keys:
            if key not in ds.variables:
                raise KeyError(f'{key} not found in {path}')

        var = cls._as2d(ds[varkey], path)
        lat = cls._as2d(ds[cls._latkey], path)
        lon = cls._as2d(ds[cls._lonkey], path)
        for coord in (lat, lon):
            if coord.shape != var.shape:
                raise ValueError(
                    f'{path}:{coord.name} shape {coord.shape} does not match'
                    + f' {varkey} shape {var.shape}'
                )

        attrs = var.attrs
        if '_FillValue' in attrs:
            fill_value = attrs['_FillValue']
        elif 'missing_value' in attrs:
            fill_value = attrs['missing_value']
        else:
            raise KeyError(f'{path}:{varkey} has no _FillValue')

        if cls._scalekey is None:
            scale_factor = 1.0
        elif cls._scalekey in attrs:
            scale_factor = float(attrs[cls._scalekey])
        else:
            raise KeyError(f'{path}:{varkey} has no {cls._scalekey}')

        units = cls._units
        if units is None:
            units = attrs.get('units', None)

        if qa:
            qavar = cls._as2d(ds[cls._qakey], path)
            qa_values = np.asarray(qavar.values, dtype='d')
            qascale = qavar.attrs.get('scale_factor', 1)
            if qascale != 1:
                qa_values = qa_values * qascale
        else:
            qa_values = None

        return Granule(
            values=np.asarray(var.values, dtype='d'),
            latitudes=np.asarray(lat.values, dtype='d'),
            longitudes=np.asarray(lon.values, dtype='d'),
            scale_factor=scale_factor, fill_value=float(fill_value),
            path=path, varkey=varkey, units=units, qa_values=qa_values
        )

    @classmethod
    def open_granule(cls, path, varkey=None, qa=False, **kwargs):
        """
        Read a measurement variable with its latitude and longitude from
        a product file. The file is closed before returning.

        Arguments
        ---------
        path : str
            Path to a product file
        varkey : str or None
            Measurement variable in cls._datagrp. Defaults to
            cls._defaultkey
        qa : bool
            If True, also read the quality indicator
        kwargs : mappable
            Passed to xarray.open_dataset

        Returns
        -------
        granule : Granule
        """
        with cls.open_group(path, **kwargs) as ds:
            granule = cls.from_dataset(ds, varkey=varkey, qa=qa, path=path)
        return granule

    @classmethod
    def get_attribute(cls, path, attrkey, varkey=None, group=None):
        """
        Return a stored attribute value.

        Arguments
        ---------
        path : str
            Path to a product file
        attrkey : str
            Attribute name (e.g., _FillValue, units, or
            multiplication_factor_to_convert_to_molecules_percm2)
        varkey : str or None
            If None, the attribute is read from the group itself
        group : str or None
            Defaults to cls._datagrp; use '/' for global attributes

        Returns
        -------
        value : object
            Attribute value as stored
        """
        with cls.open_group(path, group=group) as ds:
            if varkey is None:
                attrs = ds.attrs
                where = f'{path}:{group or cls._datagrp}'
            else:
                if varkey not in ds.variables:
                    raise KeyError(f'{varkey} not found in {path}')
                attrs = ds[varkey].attrs
                where = f'{path}:{varkey}'
            if attrkey not in attrs:
                raise KeyError(f'{attrkey} not found in {where}')
            value = attrs[attrkey]
        return value
