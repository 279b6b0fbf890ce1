"""Settlement metadata attached to world tiles."""

from enum import Enum

from pydantic import BaseModel


class Species(str, Enum):
    """Inhabitants of a settlement."""

    HUMAN = "human"
    ORC = "orc"
    ELF = "elf"
    CAT = "cat"
    RAT = "rat"
    BEE = "bee"
    BEAR = "bear"
    GHOST = "ghost"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    @property
    def glyph(self) -> str:
        """Map symbol for a tile holding a settlement of this species."""
        return _SPECIES_GLYPHS[self]


_SPECIES_GLYPHS: dict[Species, str] = {
    Species.HUMAN: "H",
    Species.ORC: "O",
    Species.ELF: "E",
    Species.CAT: "C",
    Species.RAT: "R",
    Species.BEE: "B",
    Species.BEAR: "U",
    Species.GHOST: "G",
}


class LocationState(str, Enum):
    """Lifecycle state of a settlement."""

    THRIVING = "thriving"
    STRUGGLING = "struggling"
    ABANDONED = "abandoned"
    RUINS = "ruins"
    CURSED = "cursed"
    SACRED = "sacred"
    HIDDEN = "hidden"


class Governance(str, Enum):
    """How a settlement is ruled."""

    MONARCHY = "monarchy"
    DEMOCRACY = "democracy"
    THEOCRACY = "theocracy"
    ANARCHY = "anarchy"
    HIVEMIND = "hivemind"
    COUNCIL = "council"

    @property
    def adjective(self) -> str:
        return _GOVERNANCE_ADJECTIVES[self]


_GOVERNANCE_ADJECTIVES: dict[Governance, str] = {
    Governance.MONARCHY: "Monarchic",
    Governance.DEMOCRACY: "Democratic",
    Governance.THEOCRACY: "Theocratic",
    Governance.ANARCHY: "Anarchic",
    Governance.HIVEMIND: "Hivemind",
    Governance.COUNCIL: "Council",
}


class Industry(str, Enum):
    """Primary economic activity of a settlement."""

    FARMING = "farming"
    MINING = "mining"
    LUMBER = "lumber"
    FISHING = "fishing"
    TRADING = "trading"
    CRAFTING = "crafting"
    FORAGING = "foraging"
    HUNTING = "hunting"
    RESEARCH = "research"

    @property
    def description(self) -> str:
        return _INDUSTRY_DESCRIPTIONS[self]


_INDUSTRY_DESCRIPTIONS: dict[Industry, str] = {
    Industry.FARMING: "vast fields of crops surround the settlement",
    Industry.MINING: "the sound of pickaxes echoes from deep mines",
    Industry.LUMBER: "massive lumber mills process ancient trees",
    Industry.FISHING: "fishing boats dot the nearby waters",
    Industry.TRADING: "merchants haggle in busy marketplaces",
    Industry.CRAFTING: "skilled artisans work in numerous workshops",
    Industry.FORAGING: "foragers gather rare herbs and plants",
    Industry.HUNTING: "hunters prepare for their next expedition",
    Industry.RESEARCH: "scholars debate in marble halls",
}


# Half-open [low, high) size range per lifecycle state
SIZE_BANDS: dict[LocationState, tuple[int, int]] = {
    LocationState.RUINS: (10, 30),
    LocationState.ABANDONED: (10, 30),
    LocationState.CURSED: (5, 15),
    LocationState.HIDDEN: (5, 15),
    LocationState.STRUGGLING: (30, 50),
    LocationState.SACRED: (20, 40),
    LocationState.THRIVING: (50, 100),
}


class Settlement(BaseModel, frozen=True):
    """Immutable settlement metadata generated with the world."""

    name: str = "Settlement"
    species: Species
    state: LocationState
    size: int
    governance: Governance = Governance.DEMOCRACY
    industry: Industry = Industry.FARMING

    def size_in_band(self) -> bool:
        """Whether size lies inside the range allowed for the state."""
        low, high = SIZE_BANDS[self.state]
        return low <= self.size < high

    def size_description(self) -> str:
        if self.size <= 50:
            return "tiny"
        if self.size <= 200:
            return "small"
        if self.size <= 500:
            return "medium"
        return "large"

    def describe(self) -> str:
        """One-line description shown when standing on the settlement."""
        return (
            f"A {self.state.value} {self.size_description()} settlement of "
            f"{self.species.display_name}s under {self.governance.adjective} rule, "
            f"where {self.industry.description}."
        )
