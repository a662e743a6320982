"""
Project manifest (tokengraph.toml).

Example:

    [project]
    name = "acme-design"

    [generation]
    primary_color = "#6366F1"
    clear_existing = false
    grayscales = ["gray", "slate"]

    [store]
    path = ".tokengraph/store.json"

    [export]
    css = "build/tokens.css"
    tailwind = "build/tailwind.config.js"
    dtcg = "build/tokens.json"

    [vocabulary]
    path = "vocabulary.yaml"

    [logging]
    level = "INFO"
"""

import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from .errors import ManifestError
from .ir import DEFAULT_PRIMARY_COLOR, GenerationRequest

MANIFEST_FILE = "tokengraph.toml"

DEFAULT_GRAYSCALES = ["gray", "slate", "zinc", "neutral", "stone"]

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class GenerationConfig:
    """Defaults for the generate command."""

    primary_color: str = DEFAULT_PRIMARY_COLOR
    clear_existing: bool = False
    grayscales: list[str] = field(default_factory=lambda: list(DEFAULT_GRAYSCALES))

    def to_request(
        self, primary_color: str | None = None, clear_existing: bool | None = None
    ) -> GenerationRequest:
        return GenerationRequest(
            primary_color=primary_color or self.primary_color,
            clear_existing=self.clear_existing if clear_existing is None else clear_existing,
            grayscales=self.grayscales,
        )


@dataclass
class StoreConfig:
    path: str = ".tokengraph/store.json"


@dataclass
class ExportConfig:
    """Output paths for each export format."""

    css: str = "build/tokens.css"
    tailwind: str = "build/tailwind.config.js"
    dtcg: str = "build/tokens.json"


@dataclass
class VocabularyConfig:
    path: str = "vocabulary.yaml"


@dataclass
class LoggingConfig:
    level: str = "WARNING"


@dataclass
class ProjectManifest:
    name: str = "design-system"
    root: Path = field(default_factory=Path.cwd)
    generation: GenerationConfig = field(default_factory=GenerationConfig)
    store: StoreConfig = field(default_factory=StoreConfig)
    export: ExportConfig = field(default_factory=ExportConfig)
    vocabulary: VocabularyConfig = field(default_factory=VocabularyConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def resolve_path(self, relative: str) -> Path:
        path = Path(relative)
        return path if path.is_absolute() else self.root / path

    @property
    def store_path(self) -> Path:
        return self.resolve_path(self.store.path)

    @property
    def vocabulary_path(self) -> Path:
        return self.resolve_path(self.vocabulary.path)


def load_manifest(path: Path) -> ProjectManifest:
    """Read tokengraph.toml; a missing file yields the defaults rooted beside it.

    Raises:
        ManifestError: If the file is not valid TOML or a value has the wrong type.
    """
    root = path.parent.resolve()
    if not path.exists():
        return ProjectManifest(root=root)

    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ManifestError(f"Invalid TOML in {path}: {e}") from e

    project = data.get("project", {})
    generation_data = data.get("generation", {})
    store_data = data.get("store", {})
    export_data = data.get("export", {})
    vocabulary_data = data.get("vocabulary", {})
    logging_data = data.get("logging", {})

    grayscales = generation_data.get("grayscales", list(DEFAULT_GRAYSCALES))
    if not isinstance(grayscales, list) or not all(isinstance(g, str) for g in grayscales):
        raise ManifestError(f"[generation] grayscales must be a list of strings in {path}")

    clear_existing = generation_data.get("clear_existing", False)
    if not isinstance(clear_existing, bool):
        raise ManifestError(f"[generation] clear_existing must be true or false in {path}")

    level = str(logging_data.get("level", "WARNING")).upper()
    if level not in LOG_LEVELS:
        raise ManifestError(f"[logging] level must be one of {', '.join(LOG_LEVELS)} in {path}")

    return ProjectManifest(
        name=project.get("name", "design-system"),
        root=root,
        generation=GenerationConfig(
            primary_color=generation_data.get("primary_color", DEFAULT_PRIMARY_COLOR),
            clear_existing=clear_existing,
            grayscales=grayscales,
        ),
        store=StoreConfig(path=store_data.get("path", ".tokengraph/store.json")),
        export=ExportConfig(
            css=export_data.get("css", "build/tokens.css"),
            tailwind=export_data.get("tailwind", "build/tailwind.config.js"),
            dtcg=export_data.get("dtcg", "build/tokens.json"),
        ),
        vocabulary=VocabularyConfig(path=vocabulary_data.get("path", "vocabulary.yaml")),
        logging=LoggingConfig(level=level),
    )
