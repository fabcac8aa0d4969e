from setuptools import setup, find_packages

setup(
    name="jira-ticket-tracker",
    version="1.0.0",
    description="Poll Jira for newly created tickets from a user in a project",
    packages=find_packages(exclude=("tests", "tests.*")),
    python_requires=">=3.10",
    install_requires=[
        "requests>=2.31.0",
        "rich>=13.0.0",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "ticket-tracker=ticket_tracker.cli:main",
        ],
    },
)
