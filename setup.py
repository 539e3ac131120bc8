from setuptools import setup, find_packages


setup(
    name="gzmember",
    version="0.1",
    packages=find_packages(include=["gzmember", "gzmember.*"]),
    description="A strict, fail-fast decoder for gzip member headers.",
    author="vercingetorx",
    python_requires=">=3.8",
    install_requires=[],
    entry_points={
        "console_scripts": [
            "gzmember=gzmember.cli:main",
        ]
    },
)
