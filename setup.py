from glob import glob
from setuptools import setup


setup(
    name='pc',
    version='0.0.1',
    description='Postfix calculator',
    install_requires=[
        'regex',
        'prompt_toolkit>=3.0.29',
        'numpy',
    ],
    packages=['pc'],
    package_dir={'': 'src'},
    include_package_data=True,
    zip_safe=False,
    classifiers=[
        "Programming Language :: Python :: 3",
    ],
    python_requires='>=3.8',
    extras_require={
        'test': [
            'pytest',
            'pytest-cov',
            'coverage',
            'flake8',
            'bandit',
            'mypy',
        ],
    },
    scripts=glob('bin/*'),
    license='ISC',
)
