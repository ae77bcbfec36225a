#!/usr/bin/env python
# -*- coding: utf-8 -*-
#
# Copyright (C) 2007-2009 Christopher Lenz
# All rights reserved.
#
# This software is licensed as described in the file COPYING, which
# you should have received as part of this distribution.

from setuptools import setup

setup(
    name='couchview',
    version='0.1.0',
    description='Minimal CouchDB client with self-provisioning views',
    long_description="""
    A small Python library for CouchDB documents and views. Views are
    created on first query from the map/reduce source the caller supplies,
    so applications never have to push design documents ahead of time.""",
    license = 'BSD',
    classifiers = [
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: BSD License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Topic :: Database :: Front-Ends',
        'Topic :: Software Development :: Libraries :: Python Modules',
    ],
    packages = ['couchview', 'couchview.tests'],
    python_requires='>=3.7',
    install_requires=[
        "furl",
        "requests",
        "requests_toolbelt",
    ],
    zip_safe=True,
)
