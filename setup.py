# setup.py
from setuptools import find_namespace_packages, setup

setup(
    name="gitcat",
    version="0.1.0",
    description="Preview a git repository's tracked file tree the way a hosting service shows it",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["gitcat", "gitcat.*"]),
    package_data={"gitcat.interface.locales": ["*.json"]},
    python_requires=">=3.9",
    install_requires=[
        "rich>=13.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        'console_scripts': [
            'gitcat=gitcat.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
        "Environment :: Console",
    ],
)
