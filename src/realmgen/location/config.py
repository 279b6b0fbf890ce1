"""Location generation configuration models."""

from pydantic import BaseModel, Field


class LocationGenConfig(BaseModel):
    """Layout parameters for settlement interiors."""

    min_half_size: int = Field(default=5, description="Minimum half side length of a map")
    size_variance: int = Field(default=2, description="Max signed variance on half side")

    # Human layouts
    branch_roads_min: int = Field(default=2, description="Minimum branch roads")
    branch_roads_max: int = Field(default=4, description="Maximum branch roads")
    road_bias: float = Field(
        default=0.7, description="Chance a branch road steps along x toward center"
    )
    temple_offset: int = Field(default=2, description="Max temple offset from center")
    tavern_offset: int = Field(default=3, description="Max tavern offset from center")
    house_chance: float = Field(default=0.3, description="House chance beside a road")
    workshop_chance: float = Field(
        default=0.1, description="Chance a house gets a blacksmith or storage"
    )
    wall_size_threshold: int = Field(
        default=50, description="Settlements larger than this get walls"
    )
    wall_inset: int = Field(default=3, description="Wall distance from map edge")

    # Elf layouts
    path_scale: float = Field(default=0.1, description="Path noise frequency per tile")
    path_band: float = Field(
        default=0.12, description="Noise magnitude below this becomes path"
    )
    clusters_min: int = Field(default=3, description="Minimum treehouse clusters")
    clusters_max: int = Field(default=5, description="Maximum treehouse clusters")
    cluster_houses_min: int = Field(default=3, description="Minimum treehouses per cluster")
    cluster_houses_max: int = Field(default=6, description="Maximum treehouses per cluster")
    cluster_radius: int = Field(default=2, description="Treehouse scatter radius")
    cluster_margin: int = Field(default=5, description="Cluster center distance from edge")
    gardens_min: int = Field(default=3, description="Minimum gardens")
    gardens_max: int = Field(default=6, description="Maximum gardens")
    shrines_min: int = Field(default=2, description="Minimum shrine attempts")
    shrines_max: int = Field(default=4, description="Maximum shrine attempts")
    shrine_spacing: int = Field(
        default=5, description="Min Chebyshev distance from other points of interest"
    )

    # Spawning
    spawn_search_radius: int = Field(
        default=5, description="Rings searched around center before a full scan"
    )
