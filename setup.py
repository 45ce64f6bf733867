# setup.py
from setuptools import setup, find_packages

# Lee las dependencias desde requirements.txt
with open('requirements.txt') as f:
    required = [line for line in f.read().splitlines() if line and not line.startswith('#')]

setup(
    name="autolp_metrics",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.10",
    install_requires=required,
    extras_require={
        "test": ["pytest>=7.4", "pytest-asyncio>=0.23"],
    },
)
