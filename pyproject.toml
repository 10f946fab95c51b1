[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "barcodekit"
version = "0.1.0"
description = "Pure-Python building blocks for QR and PDF-417 barcodes, and complete 2-of-5 barcodes as pixel grids"
requires-python = ">=3.10"
dependencies = []
keywords = ["barcode", "qr", "qrcode", "pdf417", "2of5", "interleaved"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["barcodekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
