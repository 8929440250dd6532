# coding=utf-8
"""Setup package 'ratnum'."""

from setuptools import setup

with open('README.md') as file:
    long_description = file.read()

setup(
    name="ratnum",
    version="0.2.0",
    author="Michael Amrhein",
    author_email="michael@adrhinum.de",
    description="Exact rational number arithmetic",
    long_description=long_description,
    long_description_content_type="text/markdown",
    package_dir={'': 'src'},
    packages=['ratnum'],
    python_requires=">=3.8",
    extras_require={
        'test': ["pytest", "hypothesis"],
        },
    license='BSD',
    keywords='rational number fraction datatype',
    platforms='all',
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: BSD License",
        "Operating System :: OS Independent",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: Implementation :: CPython",
        "Programming Language :: Python :: Implementation :: PyPy",
        "Topic :: Software Development",
        "Topic :: Software Development :: Libraries",
        "Topic :: Software Development :: Libraries :: Python Modules"
        ],
    zip_safe=False,
    )
