[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tinkerkit"
version = "0.1.0"
description = "Linked lists, queues and a heap, small algorithms, text and file helpers, and tiny socket tools."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data-structures",
    "algorithms",
    "linked-list",
    "queue",
    "heap",
    "sorting",
    "http",
    "uart",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tinkerkit-files = "tinkerkit.fileutils:main"
tinkerkit-http = "tinkerkit.httpserver:main"
tinkerkit-head = "tinkerkit.headclient:main"
tinkerkit-uart-client = "tinkerkit.uart_bridge:client_main"
tinkerkit-uart-server = "tinkerkit.uart_bridge:server_main"

[tool.hatch.build.targets.wheel]
packages = ["tinkerkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
