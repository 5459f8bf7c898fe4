"""
Setup script for the ctf-leaders package.

Installs the ctf_leaders package from src/. The engine internals live in
the _leaders and _shared subpackages; the public API is re-exported from
ctf_leaders/__init__.py.
"""

from setuptools import setup, find_packages

setup(
    name="ctf-leaders",
    version="1.0.0",
    description="CTF team leader tracking from team-control bot chat",
    python_requires=">=3.10",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "python-dotenv>=1.0.0",
        "pydantic>=2.5.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
        "dev": [
            "pytest>=7.0",
            "build",
            "wheel",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
