from setuptools import setup, find_packages

setup(
    name = "jarid",
    version = "0.1.0",
    description = "Guess the Maven coordinates of Java archives from their contents",
    packages = find_packages(include=["jarid", "jarid.*"]),
    install_requires=[
        "click",
        "loguru",
        "pydantic>=2.0",
        "PyYAML",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov",
        ],
    },
    entry_points={
        "console_scripts": [
            "jarid=jarid.cli:main",
        ],
    },
    python_requires = ">=3.9",
)
