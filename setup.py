from setuptools import find_packages, setup

setup(
    name="mdmerge",
    version="0.3.0",
    description="Validate cross-file anchor links and merge markdown fragments into one document",
    author="William Wieselquist",
    packages=find_packages(include=["mdmerge", "mdmerge.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "typer<0.26",  # Command line interface (0.26+ vendors click; the CLI reads the click context)
        "click",  # Usage errors and context lookup (typer backend)
        "rich",  # Terminal formatting
        "pydantic>=2",  # Configuration and output schemas
        "PyYAML",  # YAML output
        "pygments",  # Highlighted structured output on a terminal
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "pytest-xdist>=3.0",  # Parallel test execution
        ],
        "dev": [
            "pre-commit",  # Git hook management
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "types-PyYAML",  # Type stubs
            "types-setuptools",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "mdmerge=mdmerge.cli:main",
        ],
    },
)
