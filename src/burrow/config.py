"""Burrow configuration.

BurrowConfig is the central configuration object, frozen after creation.
"""

from dataclasses import dataclass, field
from pathlib import Path

from burrow._errors import ConfigError
from burrow._types import CollisionPolicy

# Page-file extensions recognised by the host framework
PAGE_EXTENSIONS: tuple[str, ...] = (
    ".astro",
    ".ts",
    ".tsx",
    ".js",
    ".jsx",
    ".md",
    ".mdx",
)

_COLLISION_POLICIES = frozenset({"error", "last-wins"})


@dataclass(frozen=True, slots=True)
class BurrowConfig:
    """Configuration for route discovery and declaration generation.

    Attributes:
        root: Path to the project root. Always resolved to an absolute path
              on construction.
        src_dir: Source directory, relative to ``root``.
        pages_dir: Directory containing page files, relative to ``src_dir``.
        declarations_file: Output path of the generated route stub,
            relative to ``root`` unless absolute.
        on_collision: ``"error"`` rejects ambiguous route paths when the
            declarations are generated; ``"last-wins"`` keeps the entry that
            was scanned last.

    """

    root: Path = field(default_factory=Path.cwd)
    src_dir: str = "src"
    pages_dir: str = "pages"
    declarations_file: Path = field(default_factory=lambda: Path("src/burrow_routes.pyi"))
    on_collision: CollisionPolicy = "error"

    def __post_init__(self) -> None:
        # Resolve root to absolute so that watchfiles (which returns
        # absolute paths) can be compared via Path.relative_to().
        if not self.root.is_absolute():
            object.__setattr__(self, "root", self.root.resolve())
        if not isinstance(self.declarations_file, Path):
            object.__setattr__(self, "declarations_file", Path(str(self.declarations_file)))
        if self.on_collision not in _COLLISION_POLICIES:
            msg = (
                f"on_collision must be one of {sorted(_COLLISION_POLICIES)}, "
                f"got {self.on_collision!r}"
            )
            raise ConfigError(msg)

    @property
    def src_path(self) -> Path:
        """Absolute path to the source directory."""
        return self.root / self.src_dir

    @property
    def pages_path(self) -> Path:
        """Absolute path to the pages directory."""
        return self.src_path / self.pages_dir

    @property
    def declarations_path(self) -> Path:
        """Absolute path to the generated declarations file."""
        if self.declarations_file.is_absolute():
            return self.declarations_file
        return self.root / self.declarations_file
