# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="malt",
    version="0.1.0",
    description="A small Lisp core: reader, tree-walking evaluator and REPL",
    packages=find_namespace_packages(include=["malt", "malt.*", "malt_server", "malt_server.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["malt = malt.__main__:main"],
    },
    zip_safe=False,
)
