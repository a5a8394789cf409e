from setuptools import setup

setup(
    name='rsimplex',
    version='0.1.0',
    description='Revised simplex method for dense standard form LPs',
    packages=['rsimplex'],
    python_requires='>=3.8',
    install_requires=[
        'numpy',
        'scipy',
        'tabulate',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': ['rsimplex=rsimplex.__main__:main'],
    },
)
