#!/usr/bin/env python3
"""
Setup script for lecture-notes-i18n
"""

from setuptools import setup, find_packages

setup(
    name="lecture-notes-i18n",
    version="0.1.0",
    description="Multilingual content versioning and migration for captured lecture notes",
    packages=find_packages(exclude=("tests", "tests.*")),
    python_requires=">=3.9",
    install_requires=[
        # 📋 Data Validation & Settings
        "pydantic>=2.6,<3",
        "pydantic-settings>=2.1,<3",
        "python-dotenv>=1.0",
    ],
    extras_require={
        # 🧪 Testing
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.21",
        ],
    },
    package_data={
        "notes_i18n": ["py.typed"],
    },
)
