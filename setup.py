# setup.py
from setuptools import setup, find_packages

setup(
    name="lightbnb_db",
    version="0.1.0",
    description="LightBnB data-access layer for users, reservations and properties",
    author="LightBnB",
    packages=find_packages(
        exclude=(
            "tests",
            "tests.*",
            "docs",
            "build",
            "dist",
        )
    ),
    install_requires=[
        "psycopg2-binary>=2.9",
    ],
    extras_require={
        "test": [
            "pytest>=7",
        ],
    },
    python_requires=">=3.10",
)
