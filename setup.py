#####################################################################################
#
#  Copyright (c) Crossbar.io Technologies GmbH
#  SPDX-License-Identifier: EUPL-1.2
#
#####################################################################################

import re

from setuptools import setup, find_packages


# Get package version and docstring from hosttrie/__init__.py
#
PACKAGE_FILE = "hosttrie/__init__.py"
with open(PACKAGE_FILE, "rt") as f:
    initfile = f.read()

VSRE = r"^__version__ = ['\"]([^'\"]*)['\"]"
mo = re.search(VSRE, initfile, re.M)
if mo:
    verstr = mo.group(1)
else:
    raise RuntimeError("Unable to find version string in {}.".format(PACKAGE_FILE))

DSRE = r"__doc__ = \"\"\"(.*)\"\"\""
mo = re.search(DSRE, initfile, re.DOTALL)
if mo:
    docstr = mo.group(1)
else:
    raise RuntimeError("Unable to find doc string in {}.".format(PACKAGE_FILE))


#
# extra requirements for install variants
#

extras_require_dev = [
    'pytest>=7.0',          # MIT license
    'flake8>=5.0',          # MIT license
]

setup(
    name='hosttrie',
    version=verstr,
    description='Hostname-shaped key trie with wildcard matching',
    long_description=docstr,
    license='EUPL-1.2',
    platforms=('Any'),
    python_requires='>=3.8',
    install_requires=[
        'txaio>=23.1.1',            # MIT license
        'twisted>=22.10.0',         # MIT license
        'zope.interface>=5.2.0',    # Zope Public license
        'click>=8.1.2',             # BSD license
        'pyyaml>=6.0',              # MIT license
    ],
    extras_require={
        'dev': extras_require_dev,
    },
    packages=find_packages(include=["hosttrie", "hosttrie.*"]),
    zip_safe=False,
    classifiers=["License :: OSI Approved :: European Union Public Licence 1.2 (EUPL 1.2)",
                 "Development Status :: 3 - Alpha",
                 "Intended Audience :: Developers",
                 "Operating System :: OS Independent",
                 "Programming Language :: Python",
                 "Programming Language :: Python :: 3",
                 "Topic :: Internet :: Name Service (DNS)",
                 "Topic :: Software Development :: Libraries"],
    keywords='trie wildcard hostname domain matcher'
)
