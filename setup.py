#!/usr/bin/env python
import os
from setuptools import setup
setup(
    name='simpledb',
    version='2.0',
    description='Python SimpleDB API SDK',
    long_description = open(os.path.join(os.path.dirname(__file__), 'README')).read(),
    author='Michael Malone',
    author_email='mjmalone@gmail.com',
    url='http://github.com/mmalone/python-simpledb',

    packages=['simpledb'],
    provides=['simpledb'],
    python_requires='>=3.7',
    install_requires=[
        'httplib2',
        'simplejson',
    ],
    extras_require={
        'test': ['pytest'],
    },
)
