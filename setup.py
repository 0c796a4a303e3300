from setuptools import setup, find_packages

setup(
    name="connectn",
    version="0.1.0",
    packages=find_packages(),
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "connectn=connectn.interfaces.cli:main",
        ],
    },
)
