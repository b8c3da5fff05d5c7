import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--sysfs",
        action="store_true",
        default=False,
        help="Run integration tests that read the real /sys tree",
    )


def pytest_collection_modifyitems(config, items):
    if config.getoption("--sysfs"):
        return
    skip = pytest.mark.skip(reason="needs --sysfs flag and a Linux sysfs tree")
    for item in items:
        if "sysfs" in item.keywords:
            item.add_marker(skip)


@pytest.fixture
def make_device(tmp_path):
    """Create a fake sysfs device directory with the given attribute files."""
    def _make(dirname, **attributes):
        device = tmp_path / dirname
        device.mkdir()
        for attr, value in attributes.items():
            (device / attr).write_text(f"{value}\n")
        return device
    return _make
