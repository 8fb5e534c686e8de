from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

from domain.models import RelationDocument


class RelationRepository(Protocol):
    def load_all(self, directory: Path) -> Sequence[RelationDocument]: ...

    def load_all_with_paths(self, directory: Path) -> Sequence[tuple[Path, RelationDocument]]: ...

    def load_by_path(self, path: Path) -> RelationDocument: ...

    def save_picture(self, picture: str, path: Path) -> None: ...
