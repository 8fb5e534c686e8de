from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from domain.models import RelationDocument
from domain.ports.repositories import RelationRepository
from domain.services.parse_relations import parse_relations

RELATION_FILE_PATTERNS = ("*.txt", "*.rel")


class FileSystemRelationRepository(RelationRepository):
    def load_all(self, directory: Path) -> list[RelationDocument]:
        return [document for _, document in self.load_all_with_paths(directory)]

    def load_all_with_paths(self, directory: Path) -> list[tuple[Path, RelationDocument]]:
        return [(path, self.load_by_path(path)) for path in sorted(self._iter_paths(directory))]

    def load_by_path(self, path: Path) -> RelationDocument:
        return parse_relations(path.read_text(encoding="utf-8"))

    def save_picture(self, picture: str, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(picture, encoding="utf-8")

    def _iter_paths(self, directory: Path) -> Iterable[Path]:
        for pattern in RELATION_FILE_PATTERNS:
            yield from directory.glob(pattern)
