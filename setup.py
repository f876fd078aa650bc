from re import search
from setuptools import setup, find_packages

with open("src/graphql_webhooks/version.py") as version_file:
    version = search('version = "(.*)"', version_file.read()).group(1)

with open("README.md") as readme_file:
    readme = readme_file.read()

tests_require = [
    "pytest>=7,<9",
    "pytest-asyncio>=0.21",
    "pytest-describe>=2,<3",
]

setup(
    name="graphql-webhooks",
    version=version,
    description="Executable operations and webhook subscriptions"
    " generated from a GraphQL schema.",
    long_description=readme,
    long_description_content_type="text/markdown",
    keywords="graphql webhooks subscriptions",
    license="MIT license",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Libraries",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    install_requires=["graphql-core>=3.2,<3.3", "httpx>=0.23"],
    extras_require={"test": tests_require},
    tests_require=tests_require,
    python_requires=">=3.8,<4",
    packages=find_packages("src"),
    package_dir={"": "src"},
    # PEP-561: https://www.python.org/dev/peps/pep-0561/
    package_data={"graphql_webhooks": ["py.typed"]},
    include_package_data=True,
    zip_safe=False,
)
