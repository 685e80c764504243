import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import ielts_grading
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())


# Common test fixtures
@pytest.fixture
def note_table_correct():
    """Structured note/table/flowchart correct answer with one legacy blank."""
    return {
        "blanks": {
            "1": {"answer": "carbon dioxide", "acceptedVariants": ["CO2"], "strictWordOrder": False},
            "2": {"answer": "fifteen percent", "acceptedVariants": ["15%"], "strictWordOrder": True},
            "3": "Tuesday",
        }
    }


@pytest.fixture
def diagram_correct():
    """Diagram labels mixing word-bank (bare string) and free-text labels."""
    return {
        "labels": {
            "A": "valve",
            "B": {"answer": "water tank", "acceptedVariants": ["tank"], "strictWordOrder": True},
        }
    }
