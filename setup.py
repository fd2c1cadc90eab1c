"""
python -m build
twine upload dist/*
"""

from setuptools import setup, find_packages


def jaclient_setup():
    with open("requirements.txt", "rt") as fp:
        install_requires = fp.read().strip().split("\n")

    version = "0.9.2"

    setup(
        name="jaclient",
        packages=find_packages(exclude=["tests", "tests.*"]),
        version=version,
        license="MIT",
        description="jaclient : JSON:API client with composable middleware and compound document deserialization",
        long_description=open("README.rst").read(),
        keywords=["JsonAPI", "REST", "client", "requests"],
        python_requires=">=3.9, <4",
        install_requires=install_requires,
        classifiers=[
            "Development Status :: 3 - Alpha",
            "License :: OSI Approved :: MIT License",
            "Intended Audience :: Developers",
            "Topic :: Software Development :: Libraries",
            "Programming Language :: Python :: 3.12",
            "Programming Language :: Python :: 3.11",
            "Programming Language :: Python :: 3.10",
            "Programming Language :: Python :: 3.9",
        ],
        extras_require={"test": ["pytest>=7"]},
    )


jaclient_setup()  # pragma: no cover
