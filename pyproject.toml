[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "workos_client"
version = "0.2.0"
description = "Client for the WorkOS API: SSO connections, organization memberships and connection webhooks"
requires-python = ">=3.10"
dependencies = [
    "requests",
]
keywords = ["workos", "sso", "saml", "oauth", "webhooks", "user-management"]
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
    "Topic :: Internet :: WWW/HTTP",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[tool.hatch.build.targets.wheel]
packages = ["workos_client"]

[tool.hatch.build.targets.sdist]
include = ["workos_client", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
