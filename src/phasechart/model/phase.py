# SPDX-License-Identifier: MIT

from enum import Enum


class Phase(Enum):
    DESIGN = "design"
    ESTIMATING = "estimating"
    PRODUCTION = "production"

    @property
    def display_title(self) -> str:
        return f"{self.value.capitalize()} Phase"

    @property
    def color(self) -> str:
        return PHASE_COLORS[self]

    @property
    def order(self) -> int:
        return list(Phase).index(self)


# Bar colors for the overview chart, keyed by phase rather than by project
PHASE_COLORS: dict[Phase, str] = {
    Phase.DESIGN: "#4A90E2",
    Phase.ESTIMATING: "#50C878",
    Phase.PRODUCTION: "#FF6B6B",
}


def phase_from_str(value: str) -> Phase:
    """Resolve a phase by its name, case-insensitively.

    Raises:
        ValueError: If the name is not one of design, estimating, production
    """
    normalized = value.strip().lower()
    for phase in Phase:
        if phase.value == normalized:
            return phase
    raise ValueError(f"Unknown phase '{value}'")
