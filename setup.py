import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="pybrent",
    version="0.1.0",
    description="Bracketed scalar root finding using Brent's method.",
    install_requires=[
        'numpy', 'scipy'
    ],
    extras_require={
        'test': ['pytest'],
        'doc': ['sphinx', 'pydata-sphinx-theme'],
    },
    keywords='root finding brent bisection secant numerical',
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(include=['pybrent', 'pybrent.*']),
    python_requires='>=3.10',
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3.10",
        "Topic :: Scientific/Engineering :: Mathematics"
    ]
)
