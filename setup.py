"""Packaging for tenor-sdk.

src layout: the ``tenor_sdk`` package lives under ``src/`` so tests always run
against the installed copy instead of the working tree.
"""

from setuptools import find_packages, setup

setup(
    name="tenor-sdk",
    version="0.1.0",
    description="Async typed client for the Tenor GIF and sticker API",
    python_requires=">=3.10",
    package_dir={"": "src"},
    packages=find_packages("src"),
    install_requires=[
        "httpx>=0.27",
        "pydantic>=2.5",
        "babel>=2.12",
    ],
    extras_require={
        "test": [
            "pytest>=8",
            "pytest-asyncio>=0.23",
            "python-dotenv>=1.0",
        ],
    },
)
