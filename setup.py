#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""The setup script."""

from setuptools import setup, find_packages

with open('README.rst') as readme_file:
    readme = readme_file.read()

requirements = []

test_requirements = [
    'pytest',
]

setup(
    name='prettydoc',
    version='0.1.0',
    description="Wadler-style pretty printing of structured documents",
    long_description=readme,
    packages=find_packages(include=['prettydoc']),
    include_package_data=True,
    install_requires=requirements,
    extras_require={
        'test': test_requirements,
    },
    python_requires='>=3.6',
    license="MIT license",
    zip_safe=False,
    keywords='prettydoc pretty printer layout',
    classifiers=[
        'Development Status :: 2 - Pre-Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Natural Language :: English',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.6',
    ],
    tests_require=test_requirements,
)
