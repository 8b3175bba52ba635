from setuptools import setup, find_packages


with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="multiradix",
    version="0.1.0",
    description="Lazy mixed-radix Cartesian products and parameter grids.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    packages=find_packages(exclude=("tests", "tests.*")),
    python_requires=">=3.10",
    install_requires=["pyyaml", "pandas"],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["multiradix=multiradix.cli:main"]},
)
