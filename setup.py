from setuptools import setup, find_packages

setup(
    name="sgdlin",
    version="0.1.0",
    description="Online stochastic gradient descent for regularised linear models",
    packages=find_packages(include=["sgdlin", "sgdlin.*"]),
    install_requires=[
        "numpy",
        "scikit-learn",
        "pandas",
        "matplotlib",
    ],
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.8",
)
