from setuptools import setup, find_packages
from os import path

here = path.abspath(path.dirname(__file__))

with open(path.join(here, "README.md"), encoding="utf-8") as f:
    long_description = f.read()

setup(
    name="quantikit",
    version="0.1.0",
    description="Typed physical quantities with unit conversion and localized formatting",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/quantikit/quantikit",
    author="quantikit",
    author_email="someone@gmail.com",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3 :: Only",
    ],
    keywords="units quantities conversion localization",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.8, <4",
    install_requires=[
        "numpy>=1.17",
        "Babel>=2.9",
    ],
    extras_require={"test": ["pytest"], "dev": ["sphinx", "sphinx_rtd_theme"],},
    project_urls={
        "Bug Reports": "https://github.com/quantikit/quantikit/issues",
        "Source": "https://github.com/quantikit/quantikit/",
    },
)
