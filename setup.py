from setuptools import setup, find_packages

setup(
    name="business-justification-validator",
    version="0.1.0",
    description="Scores business justification documents against a 100-point rubric",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    py_modules=["cli"],
    package_data={
        "config": ["*.yaml"],
        "prompts": ["business_justification/*.yaml"],
    },
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",
        "pyyaml>=6.0",
        "python-docx>=0.8.11",
        "pypdf>=3.0",
        "beautifulsoup4>=4.12",
        "lxml>=4.9",
        "structlog>=23.0",
        "python-dotenv>=1.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0",
            "pytest-cov>=4.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "bj-validator=cli:main",
        ],
    },
)
