from setuptools import find_packages, setup

with open("README.md", "r") as fh:
    long_description = fh.read()

setup(
    name="PyPolint",
    version="0.0.1",
    description="Python implementation of Newton divided difference polynomial interpolation that should be added to scipy one day.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["examples"]),
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: BSD License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.8",
    install_requires=["numpy"],
    extras_require={
        "test": ["pytest", "scipy"],
        "examples": ["matplotlib"],
    },
)
