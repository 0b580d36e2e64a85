"""Find usecase definition files by name."""
from pathlib import Path
from typing import Optional


class UsecaseFileFinder:
    """Search usecase files under the given base directory."""

    PRIORITY = [".json", ".yaml", ".yml"]

    def __init__(self, base_dir: Path):
        self.base_dir = base_dir

    def find_by_id(self, usecase_id: str) -> Optional[Path]:
        """
        Find a usecase file by its file stem.

        Args:
            usecase_id: Usecase ID (e.g., "sign_in")

        Returns:
            The Path if found, otherwise None. .json wins over YAML when both exist.
        """
        if not self.base_dir.is_dir():
            return None

        candidates: list[Path] = []
        for ext in self.PRIORITY:
            for file_path in self.base_dir.rglob(f"{usecase_id}{ext}"):
                if file_path.is_file():
                    candidates.append(file_path)

        if not candidates:
            return None

        candidates.sort(key=lambda path: (self.PRIORITY.index(path.suffix), str(path)))
        return candidates[0]
