"""pyad2 package setup."""
from setuptools import setup

setup(
    name='pyad2',
    version='0.1.0',
    description='AlarmDecoder (AD2PI/AD2USB) keypad protocol decoder',
    packages=['pyad2', 'pyad2.core', 'pyad2.cli', 'pyad2.tests'],
    python_requires='>=3.10',
    install_requires=[],
    extras_require={
        'serial': ['pyserial>=3.5'],
        'cli': ['click>=8.0'],
        'dev': ['pytest>=7.0', 'pytest-cov', 'click>=8.0'],
    },
    entry_points={
        'console_scripts': [
            'pyad2=pyad2.cli.main:main',
        ],
    },
)
