[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "qrpaint"
version = "2.2.5"
description = "Draw QR code module grids as text, compressed PNG files and shaped raster blocks"
requires-python = ">=3.10"
keywords = ["qrcode", "qr", "image", "png", "jpeg", "rendering"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["qrpaint"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
