# -*- coding: utf-8 -*-

import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="xdo",
    version="0.1.0",  # will auto-update via pip_modify_setup.py
    description="Extendable data objects: protected, aliased read access to data with instance-bound custom methods",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(include=["xdo", "xdo.*"]),
    install_requires=[
         'pandas', 'sortedcontainers'
     ],
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires='>=3.9',
)
