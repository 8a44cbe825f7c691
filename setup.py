from setuptools import setup, find_packages

# Use find_packages to automatically discover all packages
packages = find_packages(include=["zigrng", "zigrng.*"])

setup(
    name="zigrng",
    version="0.1.0",
    packages=packages,
    package_data={
        "zigrng": ["cli/*.yaml"],
    },
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "numpy>=1.25",
        "scipy",
        "tqdm",
        "pyyaml",
        "typer",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": ["zigrng=zigrng.cli.sample:app"],
    },
)
