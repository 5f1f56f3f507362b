from setuptools import setup, find_packages

setup(
    name="tessera-utils",
    version="1.0.0",
    description="Standalone helpers: token date formatting, colorized console, file reading",
    author="Ashwin Nair",
    packages=find_packages(include=["tessera", "tessera.*"]),
    python_requires=">=3.9",
    install_requires=[
        "rich>=13.0",
        "PyYAML>=6.0",
        "argcomplete>=3.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "tessera = tessera.cli:main"
        ],
    },
)
