from setuptools import setup, find_packages


setup(
    name="a85codec",
    version="0.1",
    packages=find_packages(include=["a85codec", "a85codec.*"]),
    description="Adobe ASCII85 (Base85) encoder and decoder for complete byte buffers.",
    author="vercingetorx",
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": [
            "pytest>=7.0",
        ]
    },
)
