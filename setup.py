from setuptools import find_packages, setup


setup(
    name="mplreadout",
    version="0.1",
    description="Interactive data coordinate readout for Matplotlib.",
    long_description=open("README.rst", encoding="utf-8").read(),
    long_description_content_type="text/x-rst",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Framework :: Matplotlib",
        "Programming Language :: Python :: 3",
    ],
    python_requires=">=3.8",
    package_dir={"": "src"},
    packages=find_packages("src"),
    install_requires=[
        "matplotlib>=3.7",
        "numpy",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
