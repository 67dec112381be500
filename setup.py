import pathlib
import re

from setuptools import setup

with open(pathlib.Path(__file__).parent.joinpath('README.md'), 'r') as f:
    long_description = f.read()

with open(pathlib.Path(__file__).parent.joinpath('vecmetrics', '__init__.py'), 'r') as f:
    version = re.search(r'^__version__ = "(.+)"$', f.read(), re.MULTILINE).group(1)

setup(
    name='vecmetrics',
    version=version,
    packages=['vecmetrics', 'vecmetrics.utils'],
    license='MIT',
    author='',
    author_email='',
    description='Single-precision distances and correlations between vectors',
    long_description=long_description,
    long_description_content_type='text/markdown',
    install_requires=['numpy>=1.22'],
    extras_require={
        'test': ['pytest>=7', 'scipy>=1.8'],
        'bench': ['richbench', 'scipy>=1.8'],
    },
    python_requires='>=3.9',
)
