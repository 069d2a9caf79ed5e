"""Setup script for PalCheck"""

from setuptools import setup, find_packages

setup(
    name="palcheck",
    version="0.1.0",
    description="Interactive terminal palindrome checker",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "click>=8.1.0",
        "rich>=13.0.0",
        "prompt_toolkit>=3.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "pytest-asyncio>=0.21.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "palcheck=palcheck.interfaces.cli:main",
        ],
    },
    python_requires=">=3.8",
)
