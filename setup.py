from setuptools import setup, find_packages

setup(
    name="bigrational",
    version="1.0",
    description="Exact rational numbers on arbitrary-precision integers",
    long_description=("Immutable, always-reduced rational number type with exact arithmetic, comparison and "
                      "rounding, plus lossless conversion to fractions.Fraction, sympy and python-flint"),
    long_description_content_type="text/plain",
    author="Philipp Schneider",
    author_email="zgddtgt@gmail.com",
    license="Apache License 2.0",
    python_requires=">=3.7",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=["sympy"],
    extras_require={
        "flint": ["python-flint"],
        "test": ["pytest", "pytest-timeout"],
    },
    classifiers=[
        "Intended Audience :: Science/Research", "Development Status :: 3 - Alpha", "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10", "Programming Language :: Python :: 3.11", "Programming Language :: Python :: 3.12",
        "Natural Language :: English", "Operating System :: OS Independent", "Topic :: Scientific/Engineering :: Mathematics"
    ],
    keywords=["rational", "fraction", "exact arithmetic", "bigint"],
    zip_safe=False,
)
