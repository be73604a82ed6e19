from setuptools import setup, find_packages
from os import path


here = path.abspath(path.dirname(__file__))

# Get the long description from the README file
with open(path.join(here, 'README.rst'), encoding='utf-8') as f:
    long_description = f.read()


# Arguments marked as "Required" below must be included for upload to PyPI.
# Fields marked as "Optional" may be commented out.

setup(
    name='aprioriminer',
    version='1.0.0',
    description='The Python project that implements the Apriori algorithm for frequent itemsets and association rules',
    long_description=long_description,
    long_description_content_type='text/x-rst',
    license='GNU',
    packages=find_packages(exclude=['contrib', 'docs', 'tests']),
    install_requires=['pandas', 'numpy'],
    extras_require={'test': ['pytest']},
    entry_points={'console_scripts': ['aprioriminer=aprioriminer.__main__:main']},
    python_requires='>=3.8',
)
