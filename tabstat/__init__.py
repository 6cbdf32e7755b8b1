"""tabstat: interactive statistics for tabular data.

This package loads CSV and Excel files into an immutable Dataset and offers
descriptive statistics, frequency tables, charts, Student's t-tests, column
and row extraction and sampling, either from Python or through a menu-driven
terminal session.
"""

__version__ = "0.1.0"


def __getattr__(name: str):
    """Lazy imports for main package exports."""
    if name == "Dataset":
        from tabstat.core.dataset import Dataset

        return Dataset
    if name == "read_file":
        from tabstat.core.loader import read_file

        return read_file
    if name == "AnalysisSession":
        from tabstat.interactive.session import AnalysisSession

        return AnalysisSession
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "AnalysisSession",
    "Dataset",
    "read_file",
    "__version__",
]
