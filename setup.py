#!/usr/bin/env python
# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.
from setuptools import setup, find_packages
import pathlib

HERE = pathlib.Path(__file__).parent.absolute()

JSONDIFFPATCH_PATH = HERE / "jsondiffpatch"


def get_version(path):
    """Get the version string of the package from its _version.py file"""
    version_ns = {}
    with open(path) as f:
        exec(f.read(), version_ns)
    return version_ns['__version__']


VERSION = get_version(JSONDIFFPATCH_PATH / '_version.py')

with open(HERE / 'README.md') as f:
    LONG_DESCRIPTION = f.read()


if __name__ == '__main__':
    setup(
      name='jsondiffpatch',
      version=VERSION,
      description='Diffing and patching of JSON documents with JSON Pointer and JSON Patch',
      long_description=LONG_DESCRIPTION,
      long_description_content_type='text/markdown',
      license='BSD',
      packages=find_packages(exclude=['jsondiffpatch.tests', 'jsondiffpatch.tests.*']),
      package_data={
          'jsondiffpatch': ['*.schema.json'],
      },
      python_requires='>=3.8',
      install_requires=[
          'colorama',
          'jsonschema',
          'traitlets>=5',
      ],
      extras_require={
          'test': [
              'pytest>=6.0',
              'jsonpatch',
          ],
      },
      entry_points={
          'console_scripts': [
              'jsondiffpatch = jsondiffpatch.__main__:main_dispatch',
              'jsondiff = jsondiffpatch.diffapp:main',
              'jsonpatch-apply = jsondiffpatch.patchapp:main',
          ],
      },
      classifiers=[
          'Intended Audience :: Developers',
          'License :: OSI Approved :: BSD License',
          'Programming Language :: Python :: 3',
      ],
    )
