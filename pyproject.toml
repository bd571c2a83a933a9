[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "captchakit"
version = "2.0.4"
description = "Generate slide and rotate image captchas and check slide, rotate and click answers."
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = [
    "captcha",
    "slide-captcha",
    "rotate-captcha",
    "click-captcha",
    "verification",
    "image",
]
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
    "Topic :: Security",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["captchakit"]

[tool.hatch.build.targets.sdist]
include = [
    "captchakit",
    "tests",
    "README.md",
    "pyproject.toml",
]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
