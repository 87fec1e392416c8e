# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="qqlogs",
    version="1.0.0",
    description="Timestamped, level-filtered text logging with size-based rotation and backup retention",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["qqlogs", "qqlogs.*"]),
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        'console_scripts': [
            'qqlogs=qqlogs.interface.cli.app:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
