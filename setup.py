from setuptools import find_packages, setup

setup(
    name="langstr",
    version="1.0.0",
    description="Java identifier transforms and small string utilities",
    author="langstr authors",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
)
