from setuptools import setup, find_packages

setup(
    name='releaseinfo',
    version='0.1.0',
    description='Release name token matching and cleaning for media file names',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    packages=find_packages(where='src'),
    package_dir={'': 'src'},
    install_requires=[
        'requests',       # For fetching the reference lists
        'python-dotenv',  # For environment configuration
        'regex',          # For Unicode-aware token patterns
        'babel',          # For localized language names
    ],
    extras_require={
        'test': ['pytest'],
    },
    classifiers=[
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
    ],
    python_requires='>=3.8',
)
