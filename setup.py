"""Setup configuration for the Vehicle Emission Compliance Testing tool."""
from setuptools import setup, find_packages

setup(
    name="vehicle-emission-testing",
    version="0.1.0",
    description="Concurrent vehicle emission compliance testing with a queryable result registry",
    author="Emission Testing Engineering",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.9",
    install_requires=[
        "pydantic>=2.5.0",
        "tabulate>=0.9.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.4.0",
            "pytest-cov>=4.1.0",
            "black>=23.11.0",
            "ruff>=0.1.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "emission-testing=emission_testing.app.main:main",
        ],
    },
)
