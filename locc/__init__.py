"""Line count aggregation and multi-format reports."""

from .cache import CountsCache
from .languages import LanguageRegistry
from .models import Counts, Language, PathCounts

__all__ = ["Counts", "CountsCache", "Language", "LanguageRegistry", "PathCounts"]
