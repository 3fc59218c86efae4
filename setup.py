# setup.py
from setuptools import setup, find_packages

setup(
    name="crawl_fingerprint",
    version="0.1.0",
    description="Request fingerprinting and URL resolution for web crawlers",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "beautifulsoup4>=4.12",
        "click>=8.2",
        "pydantic>=2.5",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.23",
        ],
    },
    entry_points={
        "console_scripts": [
            "crawl-fingerprint=crawl_fingerprint.cli:cli",
        ],
    },
    python_requires=">=3.11",
)
