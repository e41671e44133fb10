from setuptools import setup
from setuptools import find_packages

setup(
    name='asnzone',
    version='1.0.0',
    install_requires=[
        'pyyaml'
    ],
    extras_require={
        'test': ['pytest']
    },
    python_requires='>=3.10',
    packages=find_packages(exclude=["unittests*", "tests*"]),
    scripts=["bin/asnzone"],
)
