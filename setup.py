import io
import re
from setuptools import setup, find_packages

name = "semverlite"
author = "semverlite contributors"
license = "Apache-2.0"
description = (
    "Immutable major.minor.patch versions with ordering, changelog bumps "
    "and range checks"
)


def get_version():
    # semverlite/version.py imports the package, which needs its requirements
    with io.open("semverlite/version.py", encoding="utf-8") as f:
        match = re.search(
            r"^version = Version\((\d+), (\d+), (\d+)\)", f.read(), re.MULTILINE
        )
    return ".".join(match.groups())


def get_requirements():
    with io.open("requirements.txt") as f:
        return [
            line.strip()
            for line in f.readlines()
            if line.strip() and not line.strip().startswith("#")
        ]


setup(
    name=name,
    version=get_version(),
    author=author,
    maintainer=author,
    description=description,
    long_description=io.open("README.md", "r", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    platforms=["Windows", "POSIX", "MacOSX"],
    license=license,
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=get_requirements(),
    extras_require={"test": ["pytest"]},
    python_requires=">=3.8",
    entry_points={"console_scripts": ["semverlite = semverlite.cli:app"]},
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
    ],
)
