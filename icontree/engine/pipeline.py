"""Build orchestrator — one theme pass over a set of icons.

For each icon the pass resolves which theme's source to read (rollback),
parses it, builds the abstract tree and pairs it with its name binding.
A failing icon is recorded in the pass result and never stops the others.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor

from icontree.engine.config import BuildConfig
from icontree.engine.manifest import collect_base_names
from icontree.engine.reporter import LoggingReporter, Reporter
from icontree.engine.results import IconBuild, ThemePassResult
from icontree.errors import MissingSourceError, SvgValidationError
from icontree.models.theme import ThemeVariant
from icontree.naming import rollback, themes
from icontree.svg.parser import parse_svg_file
from icontree.svg.tree import generate_abstract_tree

logger = logging.getLogger(__name__)


class IconBuilder:
    """Orchestrates theme passes."""

    def __init__(
        self,
        config: BuildConfig | None = None,
        reporter: Reporter | None = None,
    ) -> None:
        self.config = config or BuildConfig()
        self.reporter = reporter or LoggingReporter()

    def derive_bindings(
        self,
        base_names: Iterable[str],
        theme: ThemeVariant | str,
        use_kebab: bool = False,
    ) -> dict[str, str]:
        return themes.derive_bindings(base_names, theme, use_kebab)

    def build_icon(self, name: str, theme: ThemeVariant | str) -> IconBuild:
        """Build one icon. Raises on validation, parse or missing-source errors."""
        requested = themes.require_theme(theme, name)
        order = rollback.rollback_order(requested, self.config.rollback_preference)
        source_theme = rollback.resolve_available_theme(order, name, self.config.svg_dir)
        if source_theme is not requested:
            self.reporter.notice(f"{name}: no {requested.value} source, using {source_theme.value}.")

        path = rollback.source_path(self.config.svg_dir, source_theme, name)
        label = f"{source_theme.value}/{name}"
        tree = generate_abstract_tree(parse_svg_file(path, label), label)
        return IconBuild(
            name=name,
            theme=requested,
            source_theme=source_theme,
            binding=themes.binding_for(name, requested),
            tree=tree,
            source_path=path,
        )

    def run_theme_pass(self, base_names: Iterable[str], theme: ThemeVariant | str) -> ThemePassResult:
        """Build every icon for ``theme``; results keep the input order."""
        requested = themes.require_theme(theme, "theme pass")
        names = list(dict.fromkeys(base_names))
        start = time.perf_counter()
        self.reporter.info(f"Generate {len(names)} {requested.value} icons.")

        result = ThemePassResult(theme=requested)
        result.bindings = self.derive_bindings(names, requested)

        if self.config.max_workers > 1 and len(names) > 1:
            with ThreadPoolExecutor(max_workers=self.config.max_workers) as pool:
                outcomes = list(pool.map(lambda n: self._try_build(n, requested), names))
        else:
            outcomes = [self._try_build(name, requested) for name in names]

        for name, build, error in outcomes:
            if build is not None:
                result.icons.append(build)
            else:
                result.errors[name] = error

        total = (time.perf_counter() - start) * 1000
        logger.info(
            "Theme pass %s complete: %d/%d icons in %.0fms",
            requested.value,
            len(result.icons),
            len(names),
            total,
        )
        return result

    def run(self, theme_list: Iterable[ThemeVariant | str] | None = None) -> list[ThemePassResult]:
        """One pass per theme over every base name found in the source tree."""
        selected = [themes.require_theme(t, "run") for t in (theme_list or self.config.themes)]
        base_names = collect_base_names(self.config.svg_dir, self.config.themes)
        self.reporter.notice(f"Found {len(base_names)} icons in {self.config.svg_dir}.")
        return [self.run_theme_pass(base_names, theme) for theme in selected]

    def _try_build(
        self, name: str, theme: ThemeVariant
    ) -> tuple[str, IconBuild | None, str | None]:
        try:
            return name, self.build_icon(name, theme), None
        except (MissingSourceError, SvgValidationError, OSError) as e:
            logger.warning("  %s FAILED: %s", name, e)
            return name, None, str(e)


def create_builder(config: BuildConfig | None = None, reporter: Reporter | None = None) -> IconBuilder:
    """Factory function for creating a builder instance."""
    return IconBuilder(config=config, reporter=reporter)
