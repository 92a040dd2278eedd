from setuptools import setup

setup(
    name='blockaverage',
    version='0.1',
    author='James Spencer',
    packages=('blockaverage', 'blockaverage.tests'),
    license='Modified BSD license',
    description='Block averaging estimates of the standard error of correlated data',
    long_description=open('README.rst').read(),
    install_requires=['numpy', 'pandas>=1.0', 'matplotlib'],
    entry_points={
        'console_scripts': ['block_average=blockaverage.cli:main'],
    },
)
