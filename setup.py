from setuptools import setup, find_packages

setup(
    name="ycard",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "pydantic>=2",
        "pyyaml",
        "pandas>=1.5",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "ycard=ycard.cli.main:main",
        ],
    },
    python_requires=">=3.10",
)
