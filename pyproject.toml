[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hoboengine"
version = "0.1.0"
description = "Small 3D engine toolkit: vector math, primitive meshes, an entity world with transforms, simple physics, texture loading and console rendering helpers."
requires-python = ">=3.10"
dependencies = [
    "numpy",
    "pillow",
]
keywords = ["3d", "graphics", "ecs", "physics", "vector", "mesh", "texture"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["hoboengine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
