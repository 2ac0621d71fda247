"""setuptools setup for IslandXP.

Install for development:
    pip install -e ".[test]"
"""

from setuptools import setup, find_packages

setup(
    name="IslandXP",
    version="0.1.0",
    description="Experience and level progression engine for the island game",
    packages=find_packages(include=["islandxp", "islandxp.*"]),
    python_requires=">=3.10",
    install_requires=[
        "PyQt6",
        "numpy",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": ["islandxp=islandxp.__main__:main"],
    },
)
