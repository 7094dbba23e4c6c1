"""
setup.py

Установка пакетов решателя.

Использование:
    pip install -e .            # разработка
    pip install -e ".[test]"    # вместе с pytest
"""

from setuptools import setup, find_packages

setup(
    name="cracker_barrel",
    version="1.0.0",
    description="Cracker Barrel triangle peg solitaire solver",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["main"],
    python_requires=">=3.8",
    install_requires=[
        "flask>=2.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "cracker-barrel=main:main",
        ],
    },
    zip_safe=False,
)
