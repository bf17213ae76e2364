# -*- coding: utf-8 -*-
import os.path

from setuptools import setup, find_packages

root = os.path.dirname(__file__)

with open(os.path.join(root, 'README.rst')) as f:
    readme = f.read()


setup(
    name="hkmatching",
    use_scm_version={'fallback_version': '0.1.0'},
    description="Maximum cardinality bipartite matching with the Hopcroft-Karp algorithm.",
    long_description=readme,
    license='MIT',
    zip_safe=True,
    packages=find_packages(exclude=('tests', 'tests.*')),
    python_requires='>=3.8',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Intended Audience :: Science/Research',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Scientific/Engineering :: Mathematics',
    ],
    install_requires=[
        'multiset>=2.0,<4.0',
    ],
    extras_require={
        'tests': ['pytest', 'hypothesis'],
    },
)
