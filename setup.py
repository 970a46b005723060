#!/usr/bin/env python

from setuptools import setup

setup(
	name='linproj',
	version='0.1',
	description='Linear projections of labelled data: regularized LDA',
	author='Alan Degenhart',
	author_email='alandegenhart@gmail.com',
	packages=['linproj'],
	package_data={'linproj': ['config.json']},
	python_requires='>=3.9',
	install_requires=[
		'numpy',
		'scipy',
		'pandas',
		'matplotlib',
	],
	extras_require={
		'test': ['pytest'],
	},
)
