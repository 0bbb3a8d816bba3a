"""Package setup for econet24."""

from setuptools import setup, find_packages

setup(
    name="econet24-client",
    version="1.0.0",
    description="Session-authenticated client for the econet24 boiler-control service",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "requests>=2.31.0",
        "beautifulsoup4>=4.12.0",
        "lxml>=5.0.0",
        "urllib3>=2.0.0",
    ],
    extras_require={
        "ui": [
            "colorlog>=6.8.0",
        ],
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "econet24=econet24.cli:main",
        ],
    },
)
