from setuptools import setup, find_packages
setup(
    name='ranvar',
    version='0.1.0',
    description='Non-uniform random variates by rejection and transformation methods',
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires='>=3.10.0',
    packages=find_packages(exclude=['tests', 'tests.*']),
    package_data={
        'ranvar': [
            'config/examples/*.yaml',
        ],
    },
    install_requires=[
        'numpy',
        'pandas',
        'pyyaml',
        'tqdm',
    ],
    extras_require={
        'test': [
            'pytest',
            'scipy',
        ],
    },
)
