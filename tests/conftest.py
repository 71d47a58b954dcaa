import sys
from pathlib import Path

import pytest

# Ensure the project src directory is on sys.path for test imports
PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))


@pytest.fixture
def sprite_text() -> str:
    return (
        "[flap]\n"
        "frames=1\n"
        "[/]\n"
        "\n"
        "[walk]\n"
        "begin=1\n"
        "end=3\n"
        "[/]\n"
    )
