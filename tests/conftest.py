"""Global pytest fixtures for toolbox."""

pytest_plugins = [
    "tests.fixtures.events",
]
