from setuptools import setup, find_packages

setup(
    name="route_plotter",
    version="0.4.1",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "pandas>=1.2.0",
    ],
    extras_require={
        "dev": [
            "pytest>=6.0",
            "black>=21.0",
            "mypy>=0.900",
            "flake8>=3.9.0",
        ]
    },
    author="Patrick Winters",
    description="Resolve flight plan routes and legacy coordinate strings into plottable radar overlays",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    url="https://github.com/19wintersp/route-plotter",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: GNU General Public License v3 (GPLv3)",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
    ],
    python_requires=">=3.8",
)
