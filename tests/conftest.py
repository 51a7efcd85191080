from pathlib import Path

import pytest

from tests.edl.util import SAMPLE_EDL


# Fixtures shared by the parser tests and the command line tool tests.  They must be in the root
# tests directory so that every test module can see them.
@pytest.fixture
def sample_edl_file(tmp_path: Path) -> Path:
    path = tmp_path / "sample.edl"
    path.write_bytes(SAMPLE_EDL)
    return path
