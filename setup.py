from setuptools import setup, find_packages
import os.path

version_py = os.path.join(os.path.dirname(__file__), 'hexlisting', 'version.py')
with open(version_py, 'r') as f:
    d = dict()
    exec(f.read(), d)
    version = d['__version__']

with open("README.md", "r") as f:
    long_description = f.read()

setup(
    name="hexlisting",
    author="Alex Forencich",
    author_email="alex@alexforencich.com",
    description="Hex and ASCII dump of files and streams",
    long_description=long_description,
    long_description_content_type='text/markdown',
    version=version,
    packages=find_packages(include=['hexlisting', 'hexlisting.*']),
    install_requires=[],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'hexlisting = hexlisting.cli:main',
        ],
    },
    python_requires='>=3.7',
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Topic :: Software Development :: Debuggers",
        "Environment :: Console",
    ]
)
