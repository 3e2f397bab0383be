import pytest

def pytest_addoption(parser):
    parser.addoption("--runslow", action="store_true", help="run slow tests")
    parser.addoption("--quiet-log", action="store_true", help="hide debug logging")

def pytest_configure(config):
    config.addinivalue_line("markers", "slow: needs --runslow to run")
    if config.getoption("--quiet-log"):
        import richardson.util.logging as rich_log
        rich_log.set_quiet('richardson')

def pytest_collection_modifyitems(config, items):
    if config.getoption("--runslow"):
        return
    skip_slow = pytest.mark.skip(reason="need --runslow option to run")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)
