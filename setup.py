# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="shelltree",
    version="0.1.0",
    description="Rebuilds a directory tree from a cd/ls shell transcript and answers size queries",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["shelltree", "shelltree.*"]),
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'shelltree=shelltree.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
