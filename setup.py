from setuptools import setup, find_packages

setup(
    name = "linkpreview",
    version = "0.1.0",
    packages = find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "aiohttp",
        "beautifulsoup4>=4.12",
        "click",
        "loguru",
        "pydantic>=2",
        "PyYAML",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-asyncio==1.1.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "linkpreview=linkpreview.cli:main",
        ],
    },
    python_requires = ">=3.9",
)
