# -*- coding: utf-8 -
#
# This file is part of couchclient released under the MIT license.
# See the NOTICE for more information.

import os
import re

from setuptools import setup, find_packages

# read the version without importing the package
with open(os.path.join("couchclient", "version.py")) as f:
    version_info = re.search(r"version_info = \(([^)]*)\)", f.read()).group(1)
version = ".".join(v.strip() for v in version_info.split(","))

with open(os.path.join(os.path.dirname(__file__), 'README.rst')) as f:
    long_description = f.read()


setup(
    name = 'couchclient',
    version = version,

    description = 'Typed Python bindings for the CouchDB HTTP API',
    long_description = long_description,
    license = 'MIT',

    classifiers = [
        'Development Status :: 4 - Beta',
        'Environment :: Other Environment',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Topic :: Database',
        'Topic :: Utilities',
        'Topic :: Software Development :: Libraries :: Python Modules',
    ],
    packages = find_packages(exclude=['tests']),
    python_requires = '>=3.7',

    zip_safe = False,

    install_requires = [
        'requests>=2.20',
    ],

    extras_require = {
        'test': ['pytest'],
    },
)
