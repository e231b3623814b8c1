from setuptools import setup, find_packages

with open('requirements.txt') as f:
    required = f.read().splitlines()

setup(
    name = 'chefflow',
    version = '2.0.0',
    description = 'Tiered kitchen order queue (VIP > Express > Normal) with a line-based command protocol',
    packages = find_packages(exclude=['test', 'test.*']),
    python_requires = '>=3.10',
    install_requires = required,
    extras_require = {
        'test': ['pytest>=7.0', 'pytest-cov>=4.0'],
    },
    entry_points = {
        'console_scripts': ['chefflow=chefflow.cli:main'],
    },
)
