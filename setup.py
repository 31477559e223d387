#!/usr/bin/env python3
import textwrap

from pathlib import Path

from setuptools import find_packages
from setuptools import setup

NAME = "swic"
version = Path("lib/swic/version").read_text().strip()

setup(
    name=NAME,
    version=version,
    description="Inspect and configure sway input devices, and generate their sway config.",
    long_description=textwrap.dedent(
        """
        swic reads the input devices sway knows about through swaymsg, lets you change
        their libinput settings on the running session, reverting the change unless it
        is confirmed, and prints the matching `input` blocks for the sway config file."""
    ),
    license="GPLv2",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: End Users/Desktop",
        "License :: OSI Approved :: GNU General Public License v2 (GPLv2)",
        "Natural Language :: English",
        "Programming Language :: Python :: 3 :: Only",
        "Operating System :: POSIX :: Linux",
        "Topic :: Utilities",
    ],
    platforms=["linux"],
    python_requires=">=3.8",
    install_requires=[
        "PyYAML (>= 3.12)",
    ],
    extras_require={
        "test": ["pytest", "pytest-mock", "pytest-cov"],
        "dev": ["ruff"],
    },
    package_dir={"": "lib"},
    packages=find_packages(where="lib"),
    package_data={"swic": ["version"]},
    include_package_data=True,
    entry_points={"console_scripts": ["swic = swic.main:main"]},
)
