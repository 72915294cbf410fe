#!/usr/bin/env python3

from setuptools import setup, find_packages

setup(
    name="affinegeometry",
    version="0.1.0",
    description="Immutable 2D/3D geometric primitives - vectors, frames, planes and triangles with NumPy interchange",
    author="affinegeometry Team",
    packages=find_packages(exclude=["tests", "tests.*", "examples"]),
    install_requires=[
        "numpy>=1.20.0",
    ],
    extras_require={
        "plot": ["matplotlib>=3.3"],
        "test": ["pytest>=7.0", "matplotlib>=3.3"],
    },
    python_requires=">=3.8",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Scientific/Engineering :: Mathematics",
    ],
)
