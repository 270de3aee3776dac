"""
tagspan setup: tagspan is a library for span based sequence labelling
corpora, tag codecs and their evaluation
"""

from setuptools import setup, find_packages
import glob
import os

REQS = [
    'funcparserlib',
    'frozendict',
    'numpy',
    'tabulate',
    'pandas >= 0.17',
]

TEST_REQS = [
    'pytest',
]


setup(name='tagspan',
      version='0.1',
      packages=find_packages(),
      scripts=[f for f in glob.glob('scripts/*') if not os.path.isdir(f)],
      install_requires=REQS,
      extras_require={'test': TEST_REQS})
