from setuptools import setup, find_packages
import os
import re

# Import version from UserConfig/__init__.py
with open(os.path.join('UserConfig', '__init__.py'), 'r') as f:
    version = re.search(r"__version__\s*=\s*'(.*)'", f.read()).group(1)

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="UserConfig",
    version=version,
    description="Per-application configuration directories backed by cached, mergeable YAML files",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.7",
    install_requires=[
        "PyYAML>=5.1",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
)
