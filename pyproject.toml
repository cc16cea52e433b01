[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sillyengine"
version = "0.1.0"
description = "A tiny 3D game engine with shared game objects, transforms and a pygame renderer"
requires-python = ">=3.10"
keywords = ["game engine", "3d", "pygame", "transform", "renderer", "camera"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]
dependencies = [
    "numpy",
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
sillyengine-demo = "sillyengine.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["sillyengine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
