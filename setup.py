"""
Packaging script for PyPI.
"""
import setuptools

setuptools.setup(
	name='tabula-objects',
	author='The tabula authors',
	version='0.1.0',
	packages=['tabula', 'tabula.tutorial', ],
	entry_points={
		'console_scripts': ["tabula = tabula.cmdline:main"],
	},
	license='MIT',
	description='Classes, inheritance and operator overloading built from plain tables, the way table-based scripting languages do it',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Development Status :: 3 - Alpha",
		"Intended Audience :: Developers",
		"Intended Audience :: Education",
		"Topic :: Software Development :: Libraries",
		"Topic :: Education",
		"Environment :: Console",
    ],
	python_requires='>=3.9',
	install_requires=[
		"booze-tools>=0.6.2.1",
	]
)
