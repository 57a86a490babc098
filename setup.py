from setuptools import setup, find_packages

setup(
    name="md-table",
    version="1.0.0",
    description="Build pipe-delimited markdown tables from row-like data",
    author="Erick Samera",
    author_email="erick.samera@kpu.ca",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["main"],
    install_requires=[
        "rich",
    ],
    extras_require={
        "test": [
            "pytest",
            "hypothesis",
        ],
    },
    python_requires='>=3.8',
    entry_points={
        "console_scripts": [
            "md-table=main:main",
        ]
    },
    include_package_data=True,
)
