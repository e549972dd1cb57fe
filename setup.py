from setuptools import setup, find_packages

setup(
    name="userstore",
    version="0.1.0",
    description="Command-line store for a JSON file of user records",
    packages=find_packages(include=["userstore", "userstore.*"]),
    python_requires=">=3.11",
    install_requires=[
        "click>=8.0",
        "pydantic>=2.0",
        "tomli>=2.0",
        "tomli-w>=1.0",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "userstore=userstore.cli:cli",
        ],
    },
)
