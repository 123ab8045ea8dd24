"""
setup.py

Установка решателя треугольного Peg Solitaire.

Использование:
    pip install -e .
    pip install -e ".[test]"   # вместе с pytest
"""

from setuptools import setup, find_packages

setup(
    name="peg_triangle",
    version="1.0.0",
    description="Exhaustive solver for the triangular cracker barrel peg puzzle",
    packages=find_packages(include=["core", "analysis", "solvers", "solutions", "peg_io", "utils"]),
    py_modules=["main"],
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "peg-triangle = main:main",
        ],
    },
    zip_safe=False,
)
