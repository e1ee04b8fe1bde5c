import os

from setuptools import find_packages, setup

README = os.path.join(os.path.dirname(__file__), "README.md")


def readme() -> str:
    with open(README, encoding="utf-8") as f:
        return f.read()


setup(
    name="json_schema_to_sdl",
    version="1.0.0",
    description="Generate GraphQL SDL types, enums and unions from Swagger/JSON Schema definitions",
    long_description=readme(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 4 - Beta",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Code Generators",
        "Topic :: Text Processing",
        "Intended Audience :: Developers",
    ],
    keywords="json schema swagger openapi graphql sdl code generation",
    license="MIT",
    packages=find_packages(),
    python_requires=">=3.11",
    install_requires=[
        "click>=8.0.0",
        "jinja2>=3.0.0",
        "graphql-core>=3.2.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "json_schema_to_sdl=json_schema_to_sdl.json_schema_to_sdl:json_schema_to_sdl",
        ],
    },
    include_package_data=True,
    package_data={
        "json_schema_to_sdl": ["pipeline/backends/templates/*.jinja2", "tests/test_data/**/*.json"],
    },
    zip_safe=False,
)
