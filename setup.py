#!/usr/bin/env python3

import pathlib

from setuptools import find_packages, setup

HERE = pathlib.Path(__file__).parent

# Handle README.md that might not exist in Docker build
try:
    README = (HERE / "README.md").read_text()
except FileNotFoundError:
    README = "Validated offset-based binary file access with sector alignment"

setup(
    name="fileguard",
    version="1.0.0",
    description="Validated offset-based binary file access with sector alignment",
    long_description=README,
    long_description_content_type="text/markdown",
    author="Marc Rivero",
    author_email="mriverolopez@gmail.com",
    url="https://github.com/seifreed/fileguard",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: GNU General Public License v3 (GPLv3)",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.13",
        "Topic :: System :: Filesystems",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
    python_requires=">=3.10",
    install_requires=[
        "click>=8.1.7",
        "rich>=13.7.0",
        "psutil>=5.9.0",
        "python-magic>=0.4.27",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "fileguard=fileguard.cli_main:main",
        ],
    },
    include_package_data=True,
    zip_safe=False,
)
