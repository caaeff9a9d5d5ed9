"""icontree build engine — theme passes over an SVG source tree."""

from icontree.engine.config import BuildConfig
from icontree.engine.pipeline import IconBuilder, create_builder
from icontree.engine.reporter import LoggingReporter, Reporter
from icontree.engine.results import IconBuild, ThemePassResult

__all__ = [
    "BuildConfig",
    "IconBuilder",
    "create_builder",
    "LoggingReporter",
    "Reporter",
    "IconBuild",
    "ThemePassResult",
]
