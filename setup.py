from setuptools import find_packages, setup

setup(
    name="bytecmp",
    version="0.1.0",
    description="Bytecode comparison tool - positional hex diff with hash and CBOR metadata masking",
    packages=find_packages(include=["bytecmp", "bytecmp.*"]),
    python_requires=">=3.9",
    install_requires=[
        "rich",  # Terminal formatting
        "jinja2",  # Template rendering for CLI outputs
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
        ],
    },
    entry_points={
        "console_scripts": [
            "bytecmp=bytecmp.cli:main",
        ],
    },
)
