"""
Element registry for light chemical elements.

This module provides a registry of elements with the nucleus data the
orbital model needs (atomic number, neutron count) using a Singleton
pattern, plus the Bohr-style shell filling rule.
"""
from dataclasses import dataclass
from typing import Dict, List, Optional, Union

from .constants import SHELL_CAPACITIES


@dataclass(frozen=True)
class ElementData:
    """
    Immutable data for a chemical element.

    Attributes:
        symbol: Chemical symbol (e.g., "C", "Ne").
        name: Full element name (e.g., "Carbon").
        atomic_number: Atomic number Z; also the proton and electron count.
        neutrons: Neutron count of the most abundant stable isotope.
        color: CPK color for visualization as hex string (optional).

    Example:
        >>> from atomsim.core.element_registry import ElementData
        >>> c = ElementData("C", "Carbon", 6, 6, "#909090")
    """
    symbol: str
    name: str
    atomic_number: int
    neutrons: int
    color: Optional[str] = None

    @property
    def shell_occupancy(self) -> List[int]:
        """Ground-state shell occupancy under the Bohr filling rule."""
        return bohr_shell_occupancy(self.atomic_number)


def bohr_shell_occupancy(atomic_number: int) -> List[int]:
    """
    Distribute electrons over shells, filling inner shells first.

    Shell capacities are 2, 8, 8, 18. This is the simple rule that holds
    for Z <= 20; it is not an aufbau ordering.

    Args:
        atomic_number: Number of electrons to place.

    Returns:
        Per-shell electron counts, innermost first. Empty for Z = 0.

    Raises:
        ValueError: If atomic_number is negative or exceeds total capacity.

    Example:
        >>> bohr_shell_occupancy(6)
        [2, 4]
        >>> bohr_shell_occupancy(11)
        [2, 8, 1]
    """
    if atomic_number < 0:
        raise ValueError(f"Atomic number must be >= 0, got {atomic_number}")
    if atomic_number > sum(SHELL_CAPACITIES):
        raise ValueError(
            f"Atomic number {atomic_number} exceeds shell capacity "
            f"({sum(SHELL_CAPACITIES)})"
        )

    occupancy: List[int] = []
    remaining = atomic_number
    for capacity in SHELL_CAPACITIES:
        if remaining == 0:
            break
        placed = min(capacity, remaining)
        occupancy.append(placed)
        remaining -= placed
    return occupancy


class ElementRegistry:
    """
    Registry for chemical element data (Singleton pattern).

    Elements can be looked up by symbol or atomic number.

    Example:
        >>> from atomsim.core import elements
        >>> elements.get_element('C').name
        'Carbon'
        >>> elements[10].symbol
        'Ne'
        >>> 'Ar' in elements
        True
    """

    _instance: Optional["ElementRegistry"] = None
    _initialized: bool = False

    def __new__(cls) -> "ElementRegistry":
        """Singleton: Only one registry instance exists."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self) -> None:
        """Initialize periodic table data (only once)."""
        if not ElementRegistry._initialized:
            self._elements_by_symbol: Dict[str, ElementData] = {}
            self._elements_by_number: Dict[int, ElementData] = {}
            self._initialize_periodic_table()
            ElementRegistry._initialized = True

    def _initialize_periodic_table(self) -> None:
        """
        Populate registry with elements H through Ca.

        Neutron counts are those of the most abundant isotope.
        """
        elements_data = [
            ElementData("H", "Hydrogen", 1, 0, "#FFFFFF"),
            ElementData("He", "Helium", 2, 2, "#D9FFFF"),
            ElementData("Li", "Lithium", 3, 4, "#CC80FF"),
            ElementData("Be", "Beryllium", 4, 5, "#C2FF00"),
            ElementData("B", "Boron", 5, 6, "#FFB5B5"),
            ElementData("C", "Carbon", 6, 6, "#909090"),
            ElementData("N", "Nitrogen", 7, 7, "#3050F8"),
            ElementData("O", "Oxygen", 8, 8, "#FF0D0D"),
            ElementData("F", "Fluorine", 9, 10, "#90E050"),
            ElementData("Ne", "Neon", 10, 10, "#B3E3F5"),
            ElementData("Na", "Sodium", 11, 12, "#AB5CF2"),
            ElementData("Mg", "Magnesium", 12, 12, "#8AFF00"),
            ElementData("Al", "Aluminum", 13, 14, "#BFA6A6"),
            ElementData("Si", "Silicon", 14, 14, "#F0C8A0"),
            ElementData("P", "Phosphorus", 15, 16, "#FF8000"),
            ElementData("S", "Sulfur", 16, 16, "#FFFF30"),
            ElementData("Cl", "Chlorine", 17, 18, "#1FF01F"),
            ElementData("Ar", "Argon", 18, 22, "#80D1E3"),
            ElementData("K", "Potassium", 19, 20, "#8F40D4"),
            ElementData("Ca", "Calcium", 20, 20, "#3DFF00"),
        ]

        for element in elements_data:
            self._elements_by_symbol[element.symbol] = element
            self._elements_by_number[element.atomic_number] = element

    def get_element(self, identifier: Union[str, int]) -> Optional[ElementData]:
        """
        Get element data by symbol or atomic number.

        Args:
            identifier: Element symbol (str, e.g., 'C') or atomic number (int, e.g., 6).

        Returns:
            ElementData if found, None otherwise.

        Raises:
            TypeError: If identifier is neither str nor int.
        """
        if isinstance(identifier, str):
            return self._elements_by_symbol.get(identifier)
        elif isinstance(identifier, int):
            return self._elements_by_number.get(identifier)
        else:
            raise TypeError(
                f"Identifier must be str or int, got {type(identifier).__name__}"
            )

    def has_element(self, identifier: Union[str, int]) -> bool:
        """Check if element exists in registry."""
        return self.get_element(identifier) is not None

    def list_elements(self) -> List[str]:
        """Return element symbols ordered by atomic number."""
        return [
            self._elements_by_number[z].symbol
            for z in sorted(self._elements_by_number)
        ]

    def __contains__(self, identifier: Union[str, int]) -> bool:
        """Support 'in' operator."""
        return self.has_element(identifier)

    def __getitem__(self, identifier: Union[str, int]) -> ElementData:
        """
        Support indexing: registry['C'] or registry[6].

        Raises:
            KeyError: If element not found.
        """
        element = self.get_element(identifier)
        if element is None:
            raise KeyError(f"Element '{identifier}' not found")
        return element

    def __len__(self) -> int:
        """Return number of elements in registry."""
        return len(self._elements_by_symbol)


# Module-level convenience instance (Singleton)
elements = ElementRegistry()
