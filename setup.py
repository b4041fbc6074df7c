#!/usr/bin/python
from setuptools import setup

from lazygen import __version__ as version

setup(
    name='lazygen',
    version=version,
    description='''
        Lazy, pull based generators with deterministic teardown and
        deferred exception surfacing, on python generators or greenlets.
    ''',
    long_description=open('README.txt').read(),
    author='Maries Ionel Cristian',
    author_email='ionel.mc@gmail.com',
    packages=['lazygen', 'lazygen.core', 'lazygen.magic'],
    zip_safe=True,
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Software Development :: Libraries :: Python Modules',
    ],
    install_requires=["greenlet>=1.0"],
    python_requires='>=3.7',
)
