import sys

from pathlib import Path
from setuptools import setup

root_dir = Path(__file__).parent
with open(root_dir / "README.md") as f:
    readme = f.read()

extras_require = {
    "dev": ["pytest", "pytest-benchmark", "nox", "ruff", "mypy"],
    "image": ["Pillow"],
}

if sys.version_info < (3, 12):
    # There is currently no atheris support for Python 3.12
    extras_require["dev"].append("atheris")

setup(
    name="oledframe",
    version="0.1.0",
    packages=["oledframe"],
    package_data={"oledframe": ["py.typed"]},
    install_requires=[],
    extras_require=extras_require,
    description="Decoder for run-length encoded, delta compressed OLED frames",
    long_description=readme,
    long_description_content_type="text/markdown",
    license="MIT",
    scripts=[
        "tools/dumpframe.py",
    ],
    keywords=[
        "run-length encoding",
        "oled",
        "frame decoder",
        "delta compression",
    ],
    python_requires=">=3.9",
    classifiers=[
        "Programming Language :: Python",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Programming Language :: Python :: 3 :: Only",
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Topic :: System :: Archiving :: Compression",
    ],
)
