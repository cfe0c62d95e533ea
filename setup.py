from setuptools import setup, find_packages

setup(
    name="gallery-manager",
    version="0.1",
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=[
        'pydantic>=2',
        'pydantic-settings>=2'
    ],
    extras_require={
        'test': ['pytest']
    },
)
