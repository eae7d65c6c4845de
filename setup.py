from setuptools import find_packages, setup

try:
    import pypandoc

    long_description = pypandoc.convert_file("README.md", "rst", "md")
except (IOError, ImportError):
    long_description = open("README.md").read()

setup(
    name="piecewise",
    version="0.1.0",
    packages=find_packages(exclude=["contrib", "docs", "tests"]),
    include_package_data=True,
    license="MIT License",
    description="Piecewise-range remapping through chains of lookup tables",
    long_description=long_description,
    install_requires=[],
    classifiers=[
        "Intended Audience :: Developers",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3.10",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
    python_requires=">=3.10",
    extras_require={"test": ["pytest", "pydash"]},
)
