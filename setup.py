# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="lisplet",
    version="0.1.0",
    description="A small interpreter for a Scheme-like symbolic-expression core",
    packages=find_namespace_packages(include=["lisplet", "lisplet.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
