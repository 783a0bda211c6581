[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "objectshooter"
version = "0.1.0"
description = "Seed a SQLite database with generated JSON records and replay them as HTTP traffic against a consumer service"
requires-python = ">=3.10"
keywords = ["load-testing", "traffic-generation", "http", "sqlite", "seeding", "dummy-data"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Web Environment",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Testing :: Traffic Generation",
]
dependencies = [
    "flask",
    "requests",
    "python-dotenv",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[project.scripts]
objectshooter = "objectshooter.server:main"

[tool.hatch.build.targets.wheel]
packages = ["objectshooter"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
