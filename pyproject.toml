[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "magrathea"
version = "0.1.0"
description = "Interactive console tools for a trainee programme: splash screen, team introductions, audition candidates, judges, training stages, fitness, mentoring and counseling."
requires-python = ">=3.10"
dependencies = []
keywords = ["training", "audition", "console", "menu", "education"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: English",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
magrathea-intro = "magrathea.intro:main"
magrathea-splash = "magrathea.splash:main"
magrathea-candidates = "magrathea.candidates:main"
magrathea-judges = "magrathea.judges:main"
magrathea-easter-egg = "magrathea.easter_egg:main"
magrathea-stages = "magrathea.stages:main"
magrathea-fitness = "magrathea.fitness:main"
magrathea-mentoring = "magrathea.mentoring:main"
magrathea-counseling = "magrathea.counseling:main"

[tool.hatch.build.targets.wheel]
packages = ["magrathea"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
