import os
from setuptools import setup


src_version = os.path.join(os.path.dirname(__file__), "aocfetch", "version.py")
with open(src_version) as f:
    version = f.read().strip().split()[-1][1:-1]


setup(
    name="aoc-fetch",
    version=version,
    description="Fetch and cache your Advent of Code puzzle inputs",
    long_description=open("README.rst").read(),
    long_description_content_type="text/x-rst",
    packages=["aocfetch"],
    python_requires=">=3.9",
    license="MIT",
    classifiers=[
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Topic :: Software Development :: Libraries",
        "Topic :: Games/Entertainment :: Puzzle Games",
    ],
    install_requires=[
        "urllib3",
    ],
    extras_require={
        "test": [
            "pook",
            "pytest",
            "pytest-mock",
            "pytest-raisin",
        ],
    },
)
