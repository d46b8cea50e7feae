from setuptools import setup, find_packages

setup(
    name="teaser",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.11",
    install_requires=[
        "pydantic>=2.0.0",
        "nltk>=3.5",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
