"""
Packaging script for PyPI.
"""
import setuptools

setuptools.setup(
	name='semialign',
	version='0.1.0',
	packages=['semialign'],
	entry_points={
		'console_scripts': ["semialign = semialign.cmdline:main"],
	},
	license='MIT',
	description='Zip that keeps everything: the Semialign and Align type classes, with These',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	classifiers=[
		"Programming Language :: Python :: 3.12",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Development Status :: 3 - Alpha",
		"Intended Audience :: Developers",
		"Topic :: Software Development :: Libraries",
    ],
	python_requires='>=3.12',
	install_requires=[
		"booze-tools>=0.6.2.1",
	],
	extras_require={
		'test': ["pytest"],
	},
)
