import sys
from pathlib import Path

import pytest

# Ensure the project src directory is on sys.path for test imports
PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))


@pytest.fixture
def family():
    """The bundled eight-person sample family, freshly parsed."""
    from gedcom_viewer.parser_core import parse_gedcom_file
    from gedcom_viewer.utils import mock_file_path

    return parse_gedcom_file(mock_file_path("family.ged"))
