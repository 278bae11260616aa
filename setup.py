from setuptools import find_packages, setup

setup(
    name="txnstats",
    version="0.3.0",
    description="Point-in-time health report for mgo/txn transaction bookkeeping collections",
    packages=find_packages(include=["txnstats", "txnstats.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pymongo>=4.0",  # MongoDB driver
        "pydantic>=2.0",  # Config and output validation
        "typer>=0.12",  # CLI
        "click>=8.0",  # Exceptions raised through typer
        "rich",  # Terminal formatting
        "pyyaml",  # YAML report output
        "mongomock",  # In-memory backend (database.type = "mongomock")
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
        ],
    },
    entry_points={
        "console_scripts": [
            "txnstats=txnstats.cli:main",
        ],
    },
)
