from setuptools import setup, find_packages

setup(
    name="sharc",
    version="0.1.0",
    description="sharc - command-line front-end for the Shard Programming Language compiler",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    author="Shard Project",
    python_requires=">=3.9",
    packages=find_packages(),
    entry_points={
        "console_scripts": [
            "sharc=sharc.cli:main",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Topic :: Software Development :: Compilers",
    ],
)
