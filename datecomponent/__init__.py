from importlib.resources import files

from .calculator import calculate
from .component import DateComponent
from .util import DAY, HOUR, MINUTE, SECOND, WEEK, last_day_of_month

# Load documentation files for programmatic access by agents and code-aware tools
_docs_path = files(__package__) / "docs"
docs = {
    "readme": (_docs_path / "README.md").read_text(),
    "api": (_docs_path / "API.md").read_text(),
}

__all__ = [
    "calculate",
    "DateComponent",
    "SECOND",
    "MINUTE",
    "HOUR",
    "DAY",
    "WEEK",
    "last_day_of_month",
    "docs",
]
