from setuptools import setup, find_packages

with open("requirements.txt") as f:
    required = f.read().splitlines()

setup(
    name="contextroots",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=required,
    extras_require={"test": ["pytest"]},
    python_requires=">=3.10",
    entry_points={"console_scripts": ["contextroots = contextroots.cli:main"]},
    author="jmpaz",
    description="Locate independently configured analysis context roots in a directory tree",
)
