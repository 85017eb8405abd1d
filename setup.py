#!/usr/bin/python3
from os import system

from setuptools import Command
from setuptools import find_packages
from setuptools import setup


# taken from http://stackoverflow.com/a/3780822
class CleanCommand(Command):
    """Custom clean command to tidy up the project root."""
    user_options = []

    def initialize_options(self):
        pass

    def finalize_options(self):
        pass

    def run(self):
        system('rm -vrf ./build ./dist ./*.pyc ./*.tgz ./src/*.egg-info')


setup(
    name='tstrie',
    version='0.1.0',
    license='MIT',
    description='Ternary search trie for string keys with prefix queries.',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    packages=find_packages('src'),
    package_dir={'': 'src'},
    include_package_data=True,
    zip_safe=False,
    python_requires='>=3.6',
    classifiers=[
        # complete classifier list:
        # http://pypi.python.org/pypi?%3Aaction=list_classifiers
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Topic :: Software Development :: Libraries :: Python Modules',
        'Topic :: Text Processing :: Indexing',
        'Topic :: Utilities',
    ],
    keywords=[
        'ternary search tree', 'trie', 'prefix search', 'autocomplete'
    ],
    install_requires=[],
    extras_require={
        'test': ['pytest'],
    },
    cmdclass={
        'clean': CleanCommand,
    },
)
