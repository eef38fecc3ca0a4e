from setuptools import find_packages, setup

setup(
    name="mdnav",
    version="0.1.0",
    description="Link classification, perspective-relative path resolution and link following for Markdown notebooks",
    packages=find_packages(include=["mdnav", "mdnav.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",  # Configuration and output models
        "typer<0.26",  # CLI (0.26+ vendors click; code uses click contexts directly)
        "click",  # CLI exceptions and exit handling
        "rich",  # Terminal formatting
        "pyyaml",  # YAML command output
        "pygments",  # Output highlighting
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
            "mdnav=mdnav.cli:main",
        ],
    },
)
