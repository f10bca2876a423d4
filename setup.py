##############################################################################
# Copyright (c) sqlfacade Project developers. See top-level LICENSE file
# for dates and other details.
##############################################################################

import os

from setuptools import find_packages, setup


HERE = os.path.dirname(os.path.abspath(__file__))
REQUIREMENTS_DIR = os.path.join(HERE, "requirements")

version = __import__("sqlfacade").VERSION

# Each extra is installed from requirements/<extra>.txt
extras = ["dev"]


def readme():
    """The README doubles as the package's long description on the index."""
    with open(os.path.join(HERE, "README.md")) as f:
        return f.read()


def read_requirements(filename):
    """
    Collect the requirement specifiers listed in a file under `requirements/`.

    Comments and blank lines are skipped, `-r other.txt` pulls in another file
    from the same directory and editable (`-e`) entries are left out since
    they can't be expressed in package metadata.

    Args:
        filename: Name of the file inside `requirements/`, e.g. `release.txt`.

    Returns:
        List[str]: The requirement specifiers, in file order.
    """
    requirements = []
    with open(os.path.join(REQUIREMENTS_DIR, filename)) as req_file:
        for line in req_file:
            requirement = line.split("#", 1)[0].strip()
            if not requirement or requirement.startswith("-e"):
                continue
            if requirement.startswith("-r "):
                requirements.extend(read_requirements(requirement.split(maxsplit=1)[1]))
            else:
                requirements.append(requirement)
    return requirements


setup(
    name="sqlfacade",
    author="sqlfacade developers",
    version=version,
    description="An async query-building facade over SQLite.",
    long_description=readme(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Topic :: Database",
        "Framework :: AsyncIO",
    ],
    keywords="sqlite database asyncio",
    license="MIT",
    python_requires=">=3.9",
    packages=find_packages(exclude=["tests.*", "tests"]),
    install_requires=read_requirements("release.txt"),
    extras_require={extra: read_requirements(f"{extra}.txt") for extra in extras},
    entry_points={
        "console_scripts": [
            "sqlfacade=sqlfacade.main:main",
        ]
    },
    include_package_data=True,
    zip_safe=False,
)
