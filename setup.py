"""
Setup script for decibel-ratio.

Pure-Python package; NumPy provides the per-precision floating-point math.
"""

from setuptools import setup

setup(
    name="decibel-ratio",
    version="1.0.0",
    description="Conversions between amplitude/power ratios and decibels (dBFS)",
    packages=["decibel_ratio"],
    python_requires=">=3.10",
    install_requires=["numpy>=1.24"],
    extras_require={
        "test": ["pytest>=7.0", "librosa>=0.10"],
    },
    zip_safe=False,
)
