import os
from setuptools import setup


def read(fname):
    try:
        with open(os.path.join(os.path.dirname(__file__), fname)) as f:
            return f.read()
    except OSError:
        return ""

setup(
    name="gmmem",
    version="0.1.0",

    description="Step by step Expectation-Maximization (EM) for univariate Gaussian mixture models",
    long_description=read("README.md"),
    long_description_content_type="text/markdown",

    license="MIT",
    keywords="numeric em expectation maximization gaussian mixture tutorial",

    packages=['gmmem', 'gmmem.distribution'],
    py_modules=['em_tutorial'],

    python_requires=">=3.7",
    install_requires=[
        "numpy>=1.17.0",
        "scipy>=1.0.0",
        "pandas>=1.0.0",
        "matplotlib>=3.0.0",
    ],
    extras_require={
        "test": ["pytest"],
    },

    entry_points={
        "console_scripts": ["em_tutorial=em_tutorial:main"],
    },

    classifiers=[
        "Development Status :: 3 - Alpha",
        "Operating System :: OS Independent",
        "License :: OSI Approved :: MIT License",

        "Intended Audience :: Science/Research",
        "Intended Audience :: Education",

        "Topic :: Scientific/Engineering :: Artificial Intelligence",
        "Topic :: Scientific/Engineering :: Mathematics",
    ],
)
