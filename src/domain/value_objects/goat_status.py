from __future__ import annotations

from enum import Enum


class GoatStatus(str, Enum):
    ACTIVE = "Active"
    SOLD = "Sold"
    DEAD = "Dead"
    CULLED = "Culled"


class Gender(str, Enum):
    MALE = "Male"
    FEMALE = "Female"


class GoatPurpose(str, Enum):
    BREEDING = "Breeding"
    MEAT = "Meat"
    DAIRY = "Dairy"


class GoatSource(str, Enum):
    BORN = "Born"
    PURCHASED = "Purchased"
