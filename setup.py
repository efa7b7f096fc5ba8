#!/usr/bin/env python
"""
Setup script for fallible - Option and Result values with asyncio wrappers
"""

from setuptools import setup, find_packages
import os
import re

# Read the version from the fallible/__init__.py file
with open(os.path.join("fallible", "__init__.py"), "r") as f:
    version_match = re.search(r"__version__\s*=\s*['\"]([^'\"]*)['\"]", f.read())
    version = version_match.group(1) if version_match else "0.1.0"

# Try to use README.rst first (for PyPI), fall back to README.md
long_description = ""
content_type = "text/x-rst"
if os.path.exists("README.rst"):
    with open("README.rst", "r", encoding="utf-8") as f:
        long_description = f.read()
elif os.path.exists("README.md"):
    with open("README.md", "r", encoding="utf-8") as f:
        long_description = f.read()
    content_type = "text/markdown"

# Define dependencies
install_requires = []

# Optional dependencies
extras_require = {
    "dev": [
        "pytest>=7.3.1",
        "pytest-asyncio>=0.21.0",
        "pytest-cov>=4.1.0",
        "black>=23.3.0",
        "isort>=5.12.0",
    ],
}
extras_require["test"] = extras_require["dev"][:3]

setup(
    name="fallible",
    version=version,
    description="Option and Result value types with asyncio wrappers",
    long_description=long_description,
    long_description_content_type=content_type,
    packages=find_packages(include=["fallible", "fallible.*"]),
    package_data={
        "fallible": ["py.typed"],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Framework :: AsyncIO",
        "Typing :: Typed",
    ],
    python_requires=">=3.9",
    install_requires=install_requires,
    extras_require=extras_require,
    include_package_data=True,
    zip_safe=False,
    keywords=[
        "option",
        "result",
        "monad",
        "asyncio",
        "error-handling",
    ],
)
