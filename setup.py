"""
Setup script for the accumulator number-theory package.
"""

from setuptools import setup, find_packages

with open("requirements-dev.txt", "r") as f:
    dev_requirements = [
        line.strip() for line in f if line.strip() and not line.startswith("#")
    ]

setup(
    name="accumulator-numtheory",
    version="0.2.1",
    description="Primality testing and modular arithmetic for cryptographic accumulators",
    author="BTP Research Project",
    packages=find_packages(include=["accum_numtheory", "accum_numtheory.*"]),
    python_requires=">=3.8",
    install_requires=[
        "pydantic>=2.0",
        "pydantic-settings>=2.0",
        "python-json-logger>=2.0",
    ],
    extras_require={
        "dev": dev_requirements,
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
)
