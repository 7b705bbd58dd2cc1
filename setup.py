#!/usr/bin/env python
# -*- coding: utf-8 -*-
from setuptools import find_packages, setup

# There are problems running setup.py on Windows if the encoding is not set
with open('README.md', encoding='utf8') as readme_file:
    readme = readme_file.read()
with open('HISTORY.rst', encoding='utf8') as history_file:
    history = history_file.read()


setup(
    name='tflocals',
    version='1.0.0',
    description="Updates a local value of a Terraform file in place.",
    long_description=readme + '\n\n' + history,
    long_description_content_type="text/markdown",
    author="tflocals contributors",
    packages=find_packages(include=['tflocals', 'tflocals.*']),
    entry_points={
        'console_scripts': [
            'tflocals=tflocals.cli:cli'
        ]
    },
    install_requires=[
        'Click>=8.0',
    ],
    extras_require={
        'test': ['pytest'],
    },
    python_requires=">=3.8",
    license="MIT license",
    zip_safe=False,
    keywords='terraform hcl locals ci',
    classifiers=[
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Natural Language :: English',
        'Programming Language :: Python :: 3',
        'Topic :: Software Development :: Build Tools',
    ]
)
