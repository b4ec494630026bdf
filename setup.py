import os

from setuptools import setup, find_packages


def local_file(name):
    return os.path.relpath(os.path.join(os.path.dirname(__file__), name))

with open(local_file("bstengine/__init__.py")) as o:
    for line in o:
        if line.startswith("__version__"):
            _, __version__, _ = line.split('"')


setup(
    name = "bstengine",
    version = __version__,
    description = "Unbalanced binary search tree with parent links, "
                  "successor queries and transplant based deletion",
    packages = find_packages(exclude=["tests", "tests.*"]),
    python_requires = ">=3.6",
    install_requires = [],
    extras_require = {
        "test": [
            "hypothesis >= 6.50.1",
            "pytest >= 6.0.1",
        ],
    },
    entry_points = {
        "console_scripts": ["bstdemo = bstengine.demo:main"],
    },
)
