"""World generation configuration models."""

from pydantic import BaseModel, Field


class NoiseConfig(BaseModel):
    """Layered noise parameters for a single field."""

    frequency: float = Field(default=0.02, description="Base sampling frequency per tile")
    octaves: int = Field(default=6, description="Number of octaves to sum")
    persistence: float = Field(default=0.5, description="Amplitude multiplier per octave")
    lacunarity: float = Field(default=2.0, description="Frequency multiplier per octave")


class TemperatureConfig(BaseModel):
    """Latitude-weighted temperature parameters."""

    frequency: float = Field(default=0.03, description="Temperature noise frequency")
    latitude_weight: float = Field(
        default=0.7, description="Weight of latitude versus noise (0-1)"
    )


class BiomeThresholds(BaseModel):
    """Ordered classification thresholds.

    Rules are applied in order: ocean, mountain, cold, hot+dry, hot+wet,
    then moisture bands. The first matching rule wins.
    """

    ocean: float = Field(default=0.45, description="Elevation below this is water")
    mountain: float = Field(default=0.70, description="Elevation above this is mountains")
    cold: float = Field(default=0.25, description="Temperature below this is snow")
    hot: float = Field(default=0.5, description="Temperature above this is hot")
    dry: float = Field(default=0.3, description="Hot and moisture below this is desert")
    wet: float = Field(default=0.6, description="Hot and moisture above this is jungle")
    plains_max: float = Field(default=0.4, description="Moisture below this is plains")
    forest_max: float = Field(default=0.6, description="Moisture below this is forest")


class RiverConfig(BaseModel):
    """Ridge-based river carving parameters."""

    enabled: bool = Field(default=True, description="Carve rivers into the terrain")
    frequency: float = Field(default=0.015, description="Ridge noise frequency")
    octaves: int = Field(default=3, description="Ridge noise octaves")
    persistence: float = Field(default=0.35, description="Ridge amplitude falloff")
    lacunarity: float = Field(default=2.0, description="Ridge frequency growth")
    sharpness: float = Field(default=6.0, description="Exponent applied to 1 - |noise|")
    threshold: float = Field(default=0.65, description="Ridge value above this is river")


class SettlementConfig(BaseModel):
    """Settlement seeding parameters."""

    chance: float = Field(
        default=0.05, description="Probability of a settlement on an open tile"
    )


class WorldGenConfig(BaseModel):
    """Complete world generation configuration."""

    seed: int = Field(default=42, description="Random seed for reproducibility")
    width: int = Field(default=128, description="World width in tiles")
    height: int = Field(default=128, description="World height in tiles")

    elevation: NoiseConfig = Field(default_factory=NoiseConfig)
    temperature: TemperatureConfig = Field(default_factory=TemperatureConfig)
    moisture: NoiseConfig = Field(
        default_factory=lambda: NoiseConfig(frequency=0.03, octaves=3)
    )
    biomes: BiomeThresholds = Field(default_factory=BiomeThresholds)
    rivers: RiverConfig = Field(default_factory=RiverConfig)
    settlements: SettlementConfig = Field(default_factory=SettlementConfig)
