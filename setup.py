from setuptools import setup, find_namespace_packages

setup(
    name="osm_timestamp",
    version="0.1.0",
    description="OSM timestamp codec",
    packages=find_namespace_packages(include=["indisoluble.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={"test": ["pytest>=8.0.0"]},
    entry_points={
        "console_scripts": ["osm-timestamp = indisoluble.osm_timestamp.main:main"]
    },
)
