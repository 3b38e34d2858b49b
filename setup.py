import os
from setuptools import setup


# Utility function to read the README file.
# Used for the long_description.
def read(fname):
    with open(os.path.join(os.path.dirname(__file__), fname)) as f:
        return f.read()


setup(
    name="fitpartition",
    version="0.1.0",
    description=("Optimal partitioning of ordered sequences under an additive fitness function."),
    license="BSD",
    keywords="partition dynamic-programming segmentation change-point",
    packages=['fitpartition'],
    long_description=read('README'),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Topic :: Utilities",
        "Topic :: Scientific/Engineering :: Mathematics",
        "License :: OSI Approved :: BSD License",
    ],
    python_requires='>=3.8',
    install_requires=[
        'numpy',
        'pandas',
    ],
    extras_require={
        'test': ['pytest'],
    },
)
