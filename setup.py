from setuptools import find_packages, setup

setup(
    name="vecpath",
    version="0.1.0",
    description="2D vector path geometry engine: lengths, sampling, arcs, offsets and trimming",
    packages=find_packages(include=["vecpath", "vecpath.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "vecpath=vecpath.main:run",
        ],
    },
)
