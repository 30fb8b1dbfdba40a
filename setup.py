"""
Setup script for the Cognitive Complexity package.
"""

from setuptools import setup, find_packages
import os

# Read the README
readme_path = os.path.join(os.path.dirname(__file__), 'README.md')
if os.path.exists(readme_path):
    with open(readme_path, 'r', encoding='utf-8') as f:
        long_description = f.read()
else:
    long_description = "Cognitive Complexity scores for TypeScript and JavaScript source code."

setup(
    name="cogcomplexity",
    version="1.0.0",
    author="Cognitive Complexity Team",
    author_email="cogcomplexity@example.com",
    description="Cognitive Complexity scoring for TypeScript and JavaScript",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/cogcomplexity/cogcomplexity",
    packages=find_packages(include=["cogcomplexity", "cogcomplexity.*"]),
    python_requires=">=3.9",
    install_requires=[
        "tree-sitter>=0.23",
        "tree-sitter-typescript>=0.23",
        "tree-sitter-javascript>=0.23",
        "pyyaml>=6.0",
        "rich>=13.0",
        "starlette>=0.37",
        "uvicorn>=0.29",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "httpx>=0.27",
        ],
        "dev": [
            "pytest>=7.0",
            "pytest-cov>=4.0",
            "httpx>=0.27",
            "black>=23.0",
            "mypy>=1.0",
            "ruff>=0.1.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "cogcomplexity=cogcomplexity.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Quality Assurance",
    ],
    keywords="cognitive-complexity, static-analysis, code-quality, typescript, javascript, tree-sitter",
    project_urls={
        "Bug Reports": "https://github.com/cogcomplexity/cogcomplexity/issues",
        "Source": "https://github.com/cogcomplexity/cogcomplexity",
    },
)
