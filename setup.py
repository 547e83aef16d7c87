from setuptools import setup, find_packages

setup(
    name="tablegrid",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tablegrid.tests"]),
    package_data={"tablegrid": ["configs/*.yaml"]},
    install_requires=[
        "numpy",
        "matplotlib",
        "PyYAML",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "table-viewer=tools.table_viewer:main",
        ]
    },
)
