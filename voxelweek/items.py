"""Materials and stacks of items held in the player's inventory."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar


class MaterialId(IntEnum):
    """Identifier of every kind of material."""

    NOTHING = 0
    GRASS = 1
    DIRT = 2
    STONE = 3
    OAK_BARK = 4
    OAK_LEAF = 5
    SAND = 6
    CACTUS = 7
    ROSE = 8
    TALL_GRASS = 9
    DEAD_SHRUB = 10


@dataclass(frozen=True)
class Material:
    """Shared, read-only description of one kind of material.

    Exactly one instance exists for each MaterialId, available as a class
    attribute (``Material.GRASS_BLOCK``) or through ``Material.from_id``.
    """

    id: MaterialId
    max_stack_size: int
    is_block: bool
    name: str

    NOTHING: ClassVar[Material]
    GRASS_BLOCK: ClassVar[Material]
    DIRT_BLOCK: ClassVar[Material]
    STONE_BLOCK: ClassVar[Material]
    OAK_BARK_BLOCK: ClassVar[Material]
    OAK_LEAF_BLOCK: ClassVar[Material]
    SAND_BLOCK: ClassVar[Material]
    CACTUS_BLOCK: ClassVar[Material]
    ROSE: ClassVar[Material]
    TALL_GRASS: ClassVar[Material]
    DEAD_SHRUB: ClassVar[Material]

    _by_id: ClassVar[dict[MaterialId, Material]] = {}

    @classmethod
    def from_id(cls, material_id: MaterialId | int) -> Material:
        """Return the material with the given id, or NOTHING if there is none."""
        try:
            key = MaterialId(material_id)
        except ValueError:
            return cls.NOTHING
        return cls._by_id.get(key, cls.NOTHING)


def _register(material_id: MaterialId, max_stack: int, is_block: bool, name: str) -> Material:
    material = Material(material_id, max_stack, is_block, name)
    Material._by_id[material_id] = material
    return material


Material.NOTHING = _register(MaterialId.NOTHING, 0, False, "None")
Material.GRASS_BLOCK = _register(MaterialId.GRASS, 99, True, "Grass Block")
Material.DIRT_BLOCK = _register(MaterialId.DIRT, 99, True, "Dirt Block")
Material.STONE_BLOCK = _register(MaterialId.STONE, 99, True, "Stone Block")
Material.OAK_BARK_BLOCK = _register(MaterialId.OAK_BARK, 99, True, "Oak Bark Block")
Material.OAK_LEAF_BLOCK = _register(MaterialId.OAK_LEAF, 99, True, "Oak Leaf Block")
Material.SAND_BLOCK = _register(MaterialId.SAND, 99, True, "Sand Block")
Material.CACTUS_BLOCK = _register(MaterialId.CACTUS, 99, True, "Cactus Block")
Material.ROSE = _register(MaterialId.ROSE, 99, True, "Rose")
Material.TALL_GRASS = _register(MaterialId.TALL_GRASS, 99, True, "Tall Grass")
Material.DEAD_SHRUB = _register(MaterialId.DEAD_SHRUB, 99, True, "Dead Shrub")


class ItemStack:
    """A quantity of one material, capped at the material's stack size."""

    def __init__(self, material: Material = Material.NOTHING, amount: int = 0) -> None:
        self.material = material
        self.count = amount

    def add(self, amount: int) -> int:
        """Add ``amount`` items and return how many did not fit."""
        self.count += amount
        limit = self.material.max_stack_size
        if self.count > limit:
            left_over = self.count - limit
            self.count = limit
            return left_over
        return 0

    def remove(self) -> None:
        """Take one item away; an emptied stack holds nothing."""
        self.count -= 1
        if self.count == 0:
            self.material = Material.NOTHING

    def __repr__(self) -> str:
        return f"ItemStack({self.material.name!r}, {self.count})"