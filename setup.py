from setuptools import find_packages, setup

setup(
    name="doccheck",
    version="0.1.0",
    description="Markdown documentation link checker",
    packages=find_packages(include=["doccheck", "doccheck.*"]),
    python_requires=">=3.10",
    install_requires=[
        "markdown-it-py>=3.0",  # Markdown parsing (syntax tree driving the visitor)
        "mdit-py-plugins>=0.4",  # Footnotes and front matter
        "linkify-it-py>=2.0",  # Bare URL autolinking
        "pydantic>=2.0",  # Configuration and output schemas
        "typer>=0.9,<0.26",  # CLI (0.26+ vendors click, breaking click.get_current_context)
        "click",  # Typer context access
        "rich",  # Terminal formatting
        "pyyaml",  # YAML output
        "pygments",  # Output highlighting
        "jinja2",  # Plain-text report rendering
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
        ],
        "dev": [
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "types-PyYAML",  # Type stubs
            "types-setuptools",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "doccheck=doccheck.cli:main",
        ],
    },
)
