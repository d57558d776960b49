"""Build configuration data structures.

Provides immutable build config constructed once at the CLI entry point.
Core operations receive it explicitly and never read the process environment.
"""

from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_LOCALE = "en"
LOCALE_ENV_VAR = "N8N_DEFAULT_LOCALE"
DEFAULT_MANIFEST_NAMESPACE = "n8n"
DEFAULT_SOURCE_EXTENSION = ".json"
DEFAULT_DESTINATION_EXTENSION = ".js"
ALLOWED_HEADER_KEYS = ("displayName", "description")


@dataclass(frozen=True)
class BuildConfig:
    """Immutable configuration for one build invocation.

    All paths are absolute after construction via ``for_package``.
    """

    package_root: Path
    locale: str | None
    manifest_path: Path
    dist_dir: Path
    manifest_namespace: str = DEFAULT_MANIFEST_NAMESPACE
    source_extension: str = DEFAULT_SOURCE_EXTENSION
    destination_extension: str = DEFAULT_DESTINATION_EXTENSION
    source_strip_components: int = 0
    allowed_header_keys: tuple[str, ...] = field(default=ALLOWED_HEADER_KEYS)

    @property
    def effective_locale(self) -> str:
        """Locale used for reporting; falls back to the default locale."""
        return self.locale or DEFAULT_LOCALE

    @property
    def is_translation_enabled(self) -> bool:
        """True unless the locale is unset or equal to the default locale."""
        return bool(self.locale) and self.locale != DEFAULT_LOCALE

    @property
    def headers_destination(self) -> Path:
        """Path of the aggregated headers file under the distribution directory."""
        return self.dist_dir / "nodes" / f"headers{self.destination_extension}"

    @staticmethod
    def for_package(
        package_root: Path,
        locale: str | None,
        *,
        manifest_path: Path | None = None,
        dist_dir: Path | None = None,
        manifest_namespace: str = DEFAULT_MANIFEST_NAMESPACE,
        source_extension: str = DEFAULT_SOURCE_EXTENSION,
        source_strip_components: int = 0,
    ) -> "BuildConfig":
        """Create config with paths defaulted relative to the package root.

        Args:
            package_root: Directory holding package.json and the node sources
            locale: Configured locale, or None when unset
            manifest_path: Package descriptor (default: <root>/package.json)
            dist_dir: Distribution directory (default: <root>/dist)
            manifest_namespace: Descriptor field holding the ``nodes`` list
            source_extension: Extension of translation source files
            source_strip_components: Leading registry segments dropped when
                locating translation sources

        Raises:
            ValueError: If the extension or strip count is malformed
        """
        if not source_extension.startswith("."):
            raise ValueError(f"Source extension must start with '.': {source_extension!r}")
        if source_strip_components < 0:
            raise ValueError(
                f"Strip components must be non-negative, got {source_strip_components}"
            )

        root = package_root.resolve()
        resolved_manifest = manifest_path if manifest_path is not None else root / "package.json"
        resolved_dist = dist_dir if dist_dir is not None else root / "dist"
        if not resolved_manifest.is_absolute():
            resolved_manifest = root / resolved_manifest
        if not resolved_dist.is_absolute():
            resolved_dist = root / resolved_dist

        return BuildConfig(
            package_root=root,
            locale=locale or None,
            manifest_path=resolved_manifest,
            dist_dir=resolved_dist,
            manifest_namespace=manifest_namespace,
            source_extension=source_extension,
            source_strip_components=source_strip_components,
        )
