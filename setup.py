# setup.py
from setuptools import setup, find_packages

setup(
    name="tau",
    version="0.1.0",
    description="A small embeddable Lisp: reader, tail-calling evaluator and printer",
    packages=find_packages(include=["tau", "tau.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["tau = tau.repl:main"],
    },
    zip_safe=False,
)
