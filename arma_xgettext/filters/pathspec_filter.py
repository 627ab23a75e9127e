"""Pathspec-based source file filtering.

Directory scans skip anything matched by the tree's ``.gitignore`` files,
the built-in defaults for packed mod output, or extra ``exclude`` patterns
given on the command line or in the configuration file.
"""

import logging
from pathlib import Path
from typing import Iterable, Iterator

import pathspec

logger = logging.getLogger(__name__)


# Always ignored, whether or not a .gitignore exists
DEFAULT_IGNORE_PATTERNS: list[str] = [
    ".git/",
    ".hemttout/",
    ".vscode/",
    ".idea/",
    "*.pbo",
    "*.bisign",
    "*.bikey",
    "*.bin",
    "*.rvmat",
    "*.p3d",
    "*.paa",
    "node_modules/",
    "__pycache__/",
    "release/",
]


def _read_patterns(gitignore_path: Path) -> list[str]:
    try:
        with open(gitignore_path, encoding="utf-8") as f:
            return f.readlines()
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Skipping unreadable {gitignore_path}: {e}")
        return []


class PathspecFilter:
    """File filter for a source tree with nested gitignore support."""

    def __init__(
        self,
        root: Path,
        exclude: Iterable[str] = (),
        include_nested: bool = True,
        use_defaults: bool = True,
    ):
        """
        Initialize the filter.

        Args:
            root: Directory the scan starts from
            exclude: Extra gitignore-style patterns, relative to ``root``
            include_nested: Whether to honour .gitignore files below ``root``
            use_defaults: Whether to apply DEFAULT_IGNORE_PATTERNS
        """
        self.root = root
        lines = list(DEFAULT_IGNORE_PATTERNS) if use_defaults else []
        gitignore_path = root / ".gitignore"
        if gitignore_path.is_file():
            lines.extend(_read_patterns(gitignore_path))
        lines.extend(exclude)
        self._root_spec = pathspec.PathSpec.from_lines("gitwildmatch", lines)
        self._nested_specs: dict[Path, pathspec.PathSpec] = {}
        if include_nested:
            self._load_nested_gitignores()

    def _load_nested_gitignores(self) -> None:
        for gitignore_path in self.root.rglob(".gitignore"):
            if gitignore_path.parent == self.root:
                continue
            relative_dir = gitignore_path.parent.relative_to(self.root)
            spec = pathspec.PathSpec.from_lines("gitwildmatch", _read_patterns(gitignore_path))
            self._nested_specs[relative_dir] = spec

    def should_ignore(self, path: Path, is_dir: bool = False) -> bool:
        """
        Check whether a path below the root should be skipped.

        Nested .gitignore files apply to their own directory and below.
        Directories are matched with a trailing slash so that ``dir/``
        patterns prune them.
        """
        try:
            relative = path.relative_to(self.root)
        except ValueError:
            relative = path
        relative_str = relative.as_posix()
        if is_dir:
            relative_str += "/"

        if self._root_spec.match_file(relative_str):
            return True

        # deepest first
        for spec_dir in sorted(self._nested_specs, key=lambda p: len(p.parts), reverse=True):
            try:
                inner = relative.relative_to(spec_dir).as_posix()
            except ValueError:
                continue
            if is_dir:
                inner += "/"
            if self._nested_specs[spec_dir].match_file(inner):
                return True
        return False

    def walk(self) -> Iterator[Path]:
        """Yield every file below the root that is not ignored, in sorted order."""
        yield from self._walk(self.root)

    def _walk(self, directory: Path) -> Iterator[Path]:
        try:
            entries = sorted(directory.iterdir())
        except OSError as e:
            logger.warning(f"Cannot list {directory}: {e}")
            return
        for entry in entries:
            if entry.is_dir():
                if not self.should_ignore(entry, is_dir=True):
                    yield from self._walk(entry)
            elif entry.is_file() and not self.should_ignore(entry):
                yield entry
