from setuptools import setup, find_namespace_packages

# Basic information
VERSION = '0.1.0'
DESCRIPTION = 'Turns arbitrary text into lowercase ASCII slugs'
LONG_DESCRIPTION = 'This package transliterates Unicode text to ASCII and joins its alphanumeric runs with a configurable separator, for use in URLs, filenames and identifiers.'

# Define requirements
# Read from requirements.txt, but filter out comments and empty lines
try:
    with open('requirements.txt', encoding='utf-8') as f:
        install_requires = [line.strip() for line in f if line.strip() and not line.startswith('#')]
except FileNotFoundError:
    install_requires = ['click>=8.0', 'Unidecode>=1.3']

setup(
    name='limace',
    version=VERSION,
    description=DESCRIPTION,
    long_description=LONG_DESCRIPTION,
    packages=find_namespace_packages(include=['limace', 'limace.*']),
    install_requires=install_requires,
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'limace = limace.cli.main:limace',
        ],
    },
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
        'Topic :: Text Processing',
        'Topic :: Utilities',
    ],
    python_requires='>=3.8',
)
