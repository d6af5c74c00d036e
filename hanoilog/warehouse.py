"""Warehouses and their stacked sections."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional

from hanoilog.package import Package


@dataclass(eq=False)
class Section:
    """A LIFO stack of packages bound for one neighbouring warehouse."""

    section_id: int = 0
    _items: list[Package] = field(default_factory=list, repr=False)

    def push(self, pack: Package) -> None:
        """Put a package on top of the section."""
        self._items.append(pack)

    def pop(self) -> Package:
        """Remove and return the package on top."""
        if not self._items:
            raise IndexError("section %d is empty" % self.section_id)
        return self._items.pop()

    def clear(self) -> None:
        """Remove every package."""
        self._items.clear()

    def is_empty(self) -> bool:
        """Tell whether the section holds no package."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Package]:
        """Iterate from the top of the stack down."""
        return reversed(self._items)


@dataclass(eq=False)
class Warehouse:
    """A warehouse holding one section per outgoing connection."""

    w_id: int = -1
    sections: list[Section] = field(default_factory=list)

    def add_section(self, section_id: int) -> Section:
        """Append a new empty section and return it."""
        section = Section(section_id)
        self.sections.append(section)
        return section

    def section(self, section_id: int) -> Optional[Section]:
        """Return the first section with this id, or None."""
        return next((s for s in self.sections if s.section_id == section_id), None)

    def store(self, section_id: int, pack: Package) -> None:
        """Push a package onto a section; unknown sections are ignored."""
        target = self.section(section_id)
        if target is not None:
            target.push(pack)