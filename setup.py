"""Setup script for strhash."""

from pathlib import Path

from setuptools import find_packages, setup

HERE = Path(__file__).parent


def read_readme():
    """Long description from README.md, if present."""
    readme = HERE / "README.md"
    if readme.exists():
        return readme.read_text(encoding="utf-8")
    return ""


setup(
    name="strhash",
    version="0.1.0",
    description="Hex digests and HMACs of strings with a fixed algorithm registry",
    long_description=read_readme(),
    long_description_content_type="text/markdown",
    python_requires=">=3.10",
    packages=find_packages(include=["strhash", "strhash.*"]),
    install_requires=[
        "click>=8.1",
        "pydantic>=2.5",
        "pydantic-settings>=2.1",
        "dependency-injector>=4.41",
        "tomli>=2.0; python_version < '3.11'",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
        ],
    },
    entry_points={
        "console_scripts": [
            "strhash=strhash.__main__:main",
        ],
    },
)
