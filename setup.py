from pathlib import Path

from setuptools import find_packages, setup

ROOT = Path(__file__).parent
README = (ROOT / "README.md").read_text(encoding="utf-8") if (ROOT / "README.md").exists() else ""

setup(
    name="pyimfilt",
    version="0.1.0",
    description="Minimal pixel-processing library: gray/RGB image buffers and spatial filters",
    long_description=README,
    long_description_content_type="text/markdown",
    author="pyimfilt Contributors",
    packages=find_packages(exclude=("tests", "tests.*")),
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.19",
        "scipy>=1.5.1",
        "Pillow>=8.0.0",
    ],
    extras_require={
        "yaml": [
            "PyYAML>=5.4",
        ],
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "PyYAML>=5.4",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Scientific/Engineering :: Image Processing",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
    keywords=[
        "image-processing",
        "filters",
        "resize",
        "sobel",
        "gaussian-blur",
        "threshold",
    ],
)
