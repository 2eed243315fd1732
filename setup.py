#!/usr/bin/env python

import os
from setuptools import setup

def read(fname):
    return open(os.path.join(os.path.dirname(__file__), fname)).read()


setup(
    name='graphwalk',
    version='0.1.0',
    description='Schema-driven query execution with field resolvers and lazy entity references',
    long_description=read("README.rst"),
    author='Michael Williamson',
    author_email='mike@zwobble.org',
    packages=['graphwalk', 'graphwalk.graphql'],
    keywords="graphql graph resolver execution",
    python_requires=">=3.7",
    extras_require={
        "graphql": ["graphql-core>=3.2"],
        "test": ["pytest", "precisely", "graphql-core>=3.2"],
    },
    license="BSD-2-Clause",
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
    ],
)
