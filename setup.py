# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from setuptools import setup


setup(
  name='optionals',
  version='0.1.0',
  description='Helpers for optional values in Python 3: unwrapping, assign-if-absent, emptiness and raw value equality.',
  license='CC0-1.0',
  python_requires='>=3.12',
  packages=['optionals', 'utest'],
)
