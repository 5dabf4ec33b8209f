[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sitekit"
version = "0.2.0"
description = "Small web-site chores: FTP session scripts, navigation trees, IP macro filtering and batch renaming"
requires-python = ">=3.10"
dependencies = []
keywords = ["ftp", "html", "session", "rename", "navigation", "outline"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: File Transfer Protocol (FTP)",
    "Topic :: Text Processing :: Markup :: HTML",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sitekit-ftpscript = "sitekit.ftpscript:main"
sitekit-navparse = "sitekit.navparse:main"
sitekit-nav = "sitekit.nav:main"
sitekit-rootname = "sitekit.rootname:main"
sitekit-webgen = "sitekit.webgen:main"
sitekit-ftpem = "sitekit.ftpem:main"
sitekit-todelphi = "sitekit.todelphi:main"

[tool.hatch.build.targets.wheel]
packages = ["sitekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
