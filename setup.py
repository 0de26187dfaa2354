from setuptools import find_packages, setup

setup(
    name="jotbook",
    version="0.1.0",
    description="Plain-text journal CLI with layered per-journal settings",
    packages=find_packages(include=["jotbook", "jotbook.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": ["jotbook=jotbook.cli:main"],
    },
)
