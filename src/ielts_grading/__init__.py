"""Top-level package for the IELTS answer grading engine.

Provides subpackages:
- ielts_grading.core – question types, answer models and payload schemas
- ielts_grading.matching – text normalization and answer matching primitives
- ielts_grading.migration – legacy answer migration and save-time normalization
- ielts_grading.grading – the grading dispatcher and submission batch helper
"""

def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from pathlib import Path

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"

    if pyproject.exists():
        try:
            content = pyproject.read_text()
            for line in content.splitlines():
                if line.strip().startswith("version"):
                    # Parse: version = "0.3.1"
                    return line.split("=")[1].strip().strip('"').strip("'")
        except OSError:
            pass

    # Fallback to importlib.metadata for installed package
    from importlib.metadata import PackageNotFoundError, version as pkg_version
    try:
        return pkg_version("ielts-grading")
    except PackageNotFoundError:
        return "0.0.0"

__version__ = _get_version()

from .grading import grade, grade_submission, GradingConfig  # noqa: E402
from .core.models import GradeResult, QuestionType, StructuredBlank  # noqa: E402

__all__: list[str] = [
    "__version__",
    "grade",
    "grade_submission",
    "GradingConfig",
    "GradeResult",
    "QuestionType",
    "StructuredBlank",
]
