import codecs
import os
import re

from setuptools import setup, find_packages

here = os.path.abspath(os.path.dirname(__file__))


def read(*parts):
    return codecs.open(os.path.join(here, *parts), 'r').read()


def read_requirements(file_name):
    lines = [line.strip() for line in read(file_name).splitlines()]
    return [line for line in lines if line and not line.startswith("#")]


def find_version(*file_paths):
    version_file = read(*file_paths)
    version_match = re.search(r"^__version__ = ['\"]([^'\"]*)['\"]", version_file, re.M)
    if version_match:
        return version_match.group(1)
    raise RuntimeError("Unable to find version string.")


# https://packaging.python.org/tutorials/packaging-projects/#creating-the-package-files
setup(
    name="speedscope_exporter",
    version=find_version("speedscope_exporter", "__init__.py"),
    packages=find_packages(exclude=("test", "test.*", "benchmarking")),
    include_package_data=True,
    description="Converts sampled call stack traces into SpeedScope evented profile events",
    long_description=read("README.md"),
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Development Status :: 4 - Beta",
        "Topic :: Software Development :: Debuggers",
        "License :: OSI Approved :: Apache Software License"
    ],

    python_requires='>=3.6',
    install_requires=read_requirements("requirements.txt"),
    extras_require={
        "test": read_requirements("requirements-test.txt"),
        "benchmark": read_requirements("requirements-benchmark.txt"),
    }
)
