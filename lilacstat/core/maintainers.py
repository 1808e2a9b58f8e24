"""Maintainer registry — package name to maintainer identifiers.

Layout: {root}/{package}/lilac.yaml

The registry is rebuilt from scratch on every run; nothing is persisted.
A package directory without a metadata file is skipped.  A metadata file
that exists but cannot be read or decoded aborts the run, so a broken
file never silently drops a package from the published index.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from lilacstat.errors import MaintainerRegistryError
from lilacstat.models.metadata import PackageMetadata

logger = logging.getLogger(__name__)

MaintainerMap = dict[str, list[str]]

DEFAULT_METADATA_NAME = "lilac.yaml"


class MaintainerRegistry:
    """Scans a package-source tree and collects maintainers per package.

    Parameters
    ----------
    root:
        Directory holding one subdirectory per package.
    metadata_name:
        File name of the metadata document inside each package directory.
    """

    def __init__(self, root: Path, metadata_name: str = DEFAULT_METADATA_NAME) -> None:
        self._root = Path(root)
        self._metadata_name = metadata_name

    def package_dirs(self) -> list[Path]:
        """Return the non-hidden package directories, sorted by name."""
        try:
            entries = sorted(self._root.iterdir())
        except OSError as exc:
            raise MaintainerRegistryError(
                f"Cannot list package tree {self._root}: {exc}", path=self._root
            ) from exc
        return [p for p in entries if not p.name.startswith(".") and p.is_dir()]

    def read_metadata(self, package_dir: Path) -> PackageMetadata | None:
        """Decode one package's metadata file.

        Returns None when the package has no metadata file.
        """
        path = package_dir / self._metadata_name
        if not path.is_file():
            logger.warning("No %s in %s, skipping package", self._metadata_name, package_dir)
            return None

        try:
            raw = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise MaintainerRegistryError(f"Cannot read {path}: {exc}", path=path) from exc

        try:
            # BaseLoader keeps every scalar as text: github logins like 1234 or
            # "yes" must not turn into int or bool
            document = yaml.load(raw, Loader=yaml.BaseLoader)
        except yaml.YAMLError as exc:
            raise MaintainerRegistryError(f"Cannot decode {path}: {exc}", path=path) from exc

        try:
            return PackageMetadata.model_validate(document or {})
        except ValidationError as exc:
            raise MaintainerRegistryError(
                f"Invalid metadata in {path}: {exc}", path=path
            ) from exc

    def load(self) -> MaintainerMap:
        """Build the full package -> maintainers map.

        Identifiers keep their order in the source document and are not
        deduplicated.  Packages with no maintainers get no key.
        """
        maintainers: MaintainerMap = {}
        for package_dir in self.package_dirs():
            metadata = self.read_metadata(package_dir)
            if metadata is None:
                continue
            for maintainer in metadata.maintainers:
                maintainers.setdefault(package_dir.name, []).append(maintainer.github)

        logger.info(
            "Loaded maintainers for %d packages from %s", len(maintainers), self._root
        )
        return maintainers


def load_maintainers(root: Path, metadata_name: str = DEFAULT_METADATA_NAME) -> MaintainerMap:
    """Convenience wrapper around ``MaintainerRegistry(root).load()``."""
    return MaintainerRegistry(root, metadata_name).load()
