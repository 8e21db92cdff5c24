from setuptools import setup, find_packages

setup(
    name="glee-signature-search",
    version="0.1.0",
    description="Search a codebase for functions by type signature",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    include_package_data=True,
    install_requires=[
        "pyyaml>=5.1",
        "colorama>=0.4.6",
        "rich>=13.0.0",
        "typer>=0.9.0",
        "tqdm>=4.60.0",
        "tree-sitter>=0.25.0",
        "tree-sitter-go>=0.23.0",
        "tree-sitter-rust>=0.23.0",
        "tree-sitter-python>=0.23.0",
    ],
    extras_require={
        "test": ["pytest>=7.0.0"],
    },
    entry_points={
        "console_scripts": [
            "glee=glee.glee_signature.main:main",
        ],
    },
    python_requires=">=3.9",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
)
