from setuptools import find_packages, setup

setup(
    name="dense_graph",
    version="0.1.0",
    description="Dense-indexed adjacency-list graphs with classical graph algorithms",
    package_dir={"": "src"},
    packages=find_packages("src"),
    python_requires=">=3.10",
    install_requires=["numpy"],
    extras_require={
        "test": ["pytest", "pytest-codspeed"],
    },
)
