import pytest


def pytest_addoption(parser):
    group = parser.getgroup("jsondiffpatch")
    group.addoption("--quick", action="store_true",
                    default=False, help="skip slow tests, such as randomized diffs")
    group.addoption("--slow", action="store_true",
                    default=False, help="only run slow tests")


def pytest_collection_modifyitems(config, items):
    if config.getoption("--quick") and config.getoption("--slow"):
        raise pytest.UsageError("--quick and --slow are mutually exclusive")
    if not config.getoption("--slow"):
        return
    only_slow = pytest.mark.skip(reason="only running tests using the slow fixture")
    for item in items:
        if 'slow' not in getattr(item, 'fixturenames', ()):
            item.add_marker(only_slow)
