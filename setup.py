from setuptools import find_packages, setup

setup(
    name="viewfinder",
    version="0.3.0",
    description="Print a Rails view with every partial it renders, inlined or listed",
    author="GAHEOS",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_packages("src"),
    install_requires=[],
    extras_require={"test": ["pytest>=7"]},
    entry_points={"console_scripts": ["viewfinder=viewfinder.cli:main"]},
)
