import setuptools

try:
    with open("README.md", "r", encoding="utf-8") as fh:
        long_description = fh.read()
except FileNotFoundError:
    long_description = "Design pattern catalog with thread-safe singleton strategies"

setuptools.setup(
    name="pattern-catalog",
    version="0.1.0",
    description="Design pattern catalog with thread-safe singleton strategies",
    long_description=long_description,
    long_description_content_type="text/markdown",
    package_dir={"": "src"},
    packages=setuptools.find_packages(
        where="src", include=["pattern_catalog", "pattern_catalog.*"]
    ),
    install_requires=[
        "pydantic>=2.0",
        "python-dotenv",
        "rich",
        "typer",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "patterns=pattern_catalog.cli.main:app",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.10",
)
