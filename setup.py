#!/usr/bin/env python

from setuptools import setup, find_packages

setup(
    name="fl_player_stats",
    version="1.0.0",
    description="Python tools for reporting player statistics from Freelancer server save files",
    author="GeNe FRAG",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    include_package_data=True,
    python_requires=">=3.7",
    install_requires=[
        "pandas>=1.0.0",
        "openpyxl>=3.0.0",
    ],
    extras_require={
        "test": ["pytest>=6.0"],
    },
    entry_points={
        "console_scripts": [
            "fl-player-report=fl_player_stats.tools.player_report:main",
        ],
    },
)
