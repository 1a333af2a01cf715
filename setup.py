from setuptools import find_packages, setup

setup(
    name="locheck",
    version="0.2.0",
    description="LocalizableChecker - find unused keys of a .strings resource file in a project tree",
    author="Jonathan Gander",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "typer<0.26",  # Command line surface (0.26+ vendors its own click)
        "click",  # Usage errors raised through Typer
        "rich",  # Terminal formatting
        "pydantic>=2",  # Config and output models
        "pyyaml",  # YAML output
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
        ],
    },
    entry_points={
        "console_scripts": [
            "locheck=locheck.cli:main",
        ],
    },
)
