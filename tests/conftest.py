import logging

import pytest

import logging_utils


@pytest.fixture(autouse=True)
def _drop_installed_handlers():
    """Handlers installed by a CliRunner invocation point at its (closed) streams."""
    yield
    root = logging.getLogger(logging_utils.ROOT_NAME)
    for handler in list(logging_utils._INSTALLED):
        root.removeHandler(handler)
        handler.close()
    logging_utils._INSTALLED.clear()


@pytest.fixture
def course_file(tmp_path):
    def write(text: str):
        path = tmp_path / "courses.txt"
        path.write_text(text, encoding="utf-8")
        return path
    return write
