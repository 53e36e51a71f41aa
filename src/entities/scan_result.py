from dataclasses import dataclass

from src.entities.archive_entry import ArchiveEntry


@dataclass(frozen=True)
class ScanResult:
    relative_path: str
    recursive: bool
    entries: tuple[ArchiveEntry, ...]

    def names(self) -> list[str]:
        return [entry.name for entry in self.entries]

    def __len__(self) -> int:
        return len(self.entries)
