#!/usr/bin/env python3

from setuptools import setup

with open("README.md") as f:
    long_description = f.read()

setup(
    name="flatpipe",
    version="0.1.0",
    description="Lazy double-ended flattening of nested iterables",
    packages=["flatpipe"],
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    license="MIT",
    long_description=long_description,
    long_description_content_type="text/markdown",
)
