# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from setuptools import setup


setup(
  name='hypermu',
  version='0.0.1',
  description='hypermu builds, validates and renders HTML, SVG and CSS trees from Python values.',
  license='CC0-1.0',
  python_requires='>=3.11',
  packages=['hypermu', 'utest'],
  install_requires=[],
)
