import os
import re

import setuptools


def read(fname):
   return open(os.path.join(os.path.dirname(__file__), fname)).read()


def version():
   return re.search(r'^__version__ = "([^"]+)"', read("auto_media/__init__.py"), re.M).group(1)


setuptools.setup(
   name='auto-media',
   version=version(),
   description='Minimal media browser service exposing a fixed playlist to car head units',
   long_description=read('README.md'),
   long_description_content_type="text/markdown",
   license="BSD2",
   keywords="media session browser android auto player",
   packages=setuptools.find_packages(exclude=["tests", "tests.*"]),
   install_requires=[
      'krozark-current-platform',
   ],
   extras_require={
      'linux': ['python-vlc'],
      'test': ['pytest'],
   },
   classifiers=[
      "Programming Language :: Python",
      "Programming Language :: Python :: 3",
      "Operating System :: OS Independent",
    ],
   python_requires='>=3.10',
)
