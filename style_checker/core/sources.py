"""Read-only access to an exercise's raw source artifacts.

Paths are relative to the exercise directory and use forward slashes
(`scss/styles.scss`, `dist/output.css`). Nothing here ever writes.
"""

from pathlib import Path

from style_checker.core.types import ArtifactMissing


class SourceInspector:
    def __init__(self, root: str | Path):
        self.root = Path(root)

    def resolve(self, path: str) -> Path:
        return self.root / path

    def exists(self, path: str) -> bool:
        return self.resolve(path).is_file()

    def read_text(self, path: str) -> str:
        """Return the artifact's text, or raise ArtifactMissing."""
        if not self.exists(path):
            raise ArtifactMissing(f'{path} not found in {self.root}')
        return self.resolve(path).read_text(encoding='utf-8')

    def read_optional(self, path: str) -> str | None:
        """Return the artifact's text, or None if it does not exist."""
        try:
            return self.read_text(path)
        except ArtifactMissing:
            return None
