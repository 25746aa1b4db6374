#! /usr/bin/python3
from setuptools import setup

setup(
    name="PermTools",
    version="1.0",
    packages=["permtools"],
    install_requires=["sympy", "tqdm"],
    extras_require={
        "test": ["pytest", "networkx"],
        "docs": ["sphinx", "sphinx_rtd_theme"],
    }
)
