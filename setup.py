from setuptools import setup, find_packages


setup(
    name="bzimage",
    version="0.1",
    packages=find_packages(include=["bzimage", "bzimage.*"]),
    description="Fixed 64-byte header container for gzip-compressed images with a SHA-256 integrity check.",
    author="vercingetorx",
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": [
            "pytest>=7.0",
        ]
    },
)
