# -*- coding: utf-8 -*-

import setuptools

setuptools.setup(
    name="nioncharting",
    version="0.1.0",
    author="Nion Software",
    author_email="swift@nion.com",
    description="Nion Charting: step line plots for Nion UI canvases",
    long_description=open("README.rst").read(),
    url="https://github.com/nion-software/nioncharting",
    packages=["nion.charting", "nion.charting.test"],
    install_requires=['numpy', 'nionutils>=0.3.17', 'nionui>=0.6.0,<8.0'],
    classifiers=[
        "Development Status :: 2 - Pre-Alpha"
    ],
    include_package_data=True,
    test_suite="nion.charting.test",
)
