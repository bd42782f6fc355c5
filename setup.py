#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# vim: ai ts=4 sts=4 et sw=4 nu

import pathlib
from setuptools import setup, find_packages

root_dir = pathlib.Path(__file__).parent


def read(*names, **kwargs):
    with open(root_dir.joinpath(*names), "r", encoding="utf-8") as fh:
        return fh.read()


setup(
    name="sitefolio",
    version=read("src", "sitefolio", "VERSION").strip(),
    description="Validated site configuration and web app manifest "
    "for personal landing pages",
    long_description=read("README.md"),
    long_description_content_type="text/markdown",
    keywords="static-site web-app-manifest portfolio landing configuration",
    license="GPLv3+",
    packages=find_packages("src"),
    package_dir={"": "src"},
    install_requires=[
        line.strip()
        for line in read("requirements.txt").splitlines()
        if line.strip() and not line.strip().startswith("#")
    ],
    extras_require={"test": ["pytest>=7.0"]},
    zip_safe=False,
    include_package_data=True,
    package_data={"sitefolio": ["VERSION"]},
    entry_points={
        "console_scripts": [
            "sitefolio=sitefolio.__main__:main",
        ]
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3.12",
        "License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)",
    ],
    python_requires=">=3.12",
)
