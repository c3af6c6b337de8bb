import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

with open("s5pmap/__init__.py", "r") as fh:
    for l in fh:
        if l.startswith('__version__'):
            exec(l)
            break
    else:
        __version__ = 'x.y.z'

setuptools.setup(
    name="s5pmap",
    version=__version__,
    description="Tabulate and map Sentinel-5P TropOMI Level 2 pixels.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(exclude=['examples']),
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: GNU General Public License v3 (GPLv3)",
        "Development Status :: 2 - Pre-Alpha",
        "Operating System :: OS Independent",
    ],
    python_requires='>=3.8',
    install_requires=[
        "numpy", "matplotlib", "pandas>=1.0", "xarray", "netCDF4", "pyproj",
        "pycno"
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": ["s5pmap=s5pmap.drivers:main"],
    },
)
