# setup.py
from setuptools import setup, find_packages

setup(
    name="qbscript",
    version="0.1.0",
    description="Interpreter for a small bracketed Lisp-like expression language",
    packages=find_packages(include=["qbscript", "qbscript.*"]),
    package_data={"qbscript": ["prelude/*.qb"]},
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["qbscript=qbscript.cli:main"],
    },
    zip_safe=False,
)
