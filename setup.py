from setuptools import setup, find_packages

setup(
    name="cadence",
    version="0.1.0",
    description="Terminal presentation timer w/ per-section timing & schedule deviation",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "typer<0.26",
        "rich",
        "readchar",
        "python-dotenv",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "cadence=cadence.cli:app",
        ],
    },
    python_requires=">=3.11",
)
