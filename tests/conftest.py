import logging
import sys
from pathlib import Path

import pytest

# Keep the repository free of Python bytecode and __pycache__ artifacts during tests.
sys.dont_write_bytecode = True

TESTS_ROOT = Path(__file__).resolve().parent
REPO_ROOT = TESTS_ROOT.parent
SRC_ROOT = REPO_ROOT / "src"

# Make src/ importable as 'uspin'
for p in (SRC_ROOT, TESTS_ROOT):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))


from helpers.fake_manager import FakeManager
from helpers.io_utils import write_file as _write_file

SAMPLE_PACKAGES = """
- repo: Solus
  uri: https://packages.example.org/shannon/eopkg-index.xml.xz
- group: [system.base, system.devel]
- group: desktop.budgie
  ignore_safety: true
- package: nano
- package: [vim, git]
"""


@pytest.fixture(autouse=True)
def _reset_uspin_logger():
    """Drop the CLI stderr handler so each test starts with a fresh logger."""
    yield
    import uspin.core.logging_setup as logging_setup

    log = logging.getLogger("uspin")
    if logging_setup._USPIN_STREAM_HANDLER is not None:
        log.removeHandler(logging_setup._USPIN_STREAM_HANDLER)
        logging_setup._USPIN_STREAM_HANDLER = None
    log.setLevel(logging.NOTSET)


@pytest.fixture
def write_file():
    return _write_file


@pytest.fixture
def fake_manager() -> FakeManager:
    return FakeManager()


@pytest.fixture
def spin_project(tmp_path: Path) -> Path:
    """A `.spin` file plus its package list; returns the `.spin` path."""
    _write_file(
        tmp_path / "budgie.spin",
        """
        image:
          name: solus-budgie
          packages: lists/budgie.packages
        """,
    )
    _write_file(tmp_path / "lists" / "budgie.packages", SAMPLE_PACKAGES)
    return tmp_path / "budgie.spin"
