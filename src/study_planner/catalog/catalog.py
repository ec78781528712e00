"""Read-only unit catalog."""

from collections.abc import Iterator, Mapping

from ..exceptions import UnknownUnitError
from ..models import UnitInfo


class Catalog:
    """Lookup table from unit code to catalog entry.

    The catalog is built once before planning starts and never mutated.
    Planning assumes every code it is asked about exists and that the
    prerequisite graph is acyclic.
    """

    def __init__(self, units: Mapping[str, UnitInfo] | None = None):
        self._units: dict[str, UnitInfo] = dict(units or {})

    def lookup(self, code: str) -> UnitInfo:
        """Get the catalog entry for a unit code."""
        try:
            return self._units[code]
        except KeyError:
            raise UnknownUnitError(code) from None

    def codes(self) -> list[str]:
        """Get all unit codes in the catalog, sorted."""
        return sorted(self._units)

    def __contains__(self, code: object) -> bool:
        return code in self._units

    def __len__(self) -> int:
        return len(self._units)

    def __iter__(self) -> Iterator[str]:
        return iter(self._units)
