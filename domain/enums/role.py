"""Role/Position enumeration."""
from enum import Enum

# Raw lane and sub-role values reported by the matchlist endpoint
BOTTOM_LANE = "BOTTOM"
DUO_CARRY = "DUO_CARRY"


class Role(Enum):
    """Derived role of a player.

    Every raw lane maps to the same-named member except BOTTOM, which is
    split into ADC and SUPPORT by the recorded sub-role.
    """

    TOP = "TOP"
    JUNGLE = "JUNGLE"
    MID = "MID"
    MIDDLE = "MIDDLE"
    ADC = "ADC"
    SUPPORT = "SUPPORT"
    NONE = "NONE"
    UNKNOWN = "UNKNOWN"

    @property
    def is_known(self) -> bool:
        return self is not Role.UNKNOWN

    @classmethod
    def from_lane(cls, lane: str) -> 'Role':
        """Map a non-BOTTOM raw lane to its role; unrecognised lanes are UNKNOWN."""
        key = (lane or "").upper()
        if key == BOTTOM_LANE:
            raise ValueError("BOTTOM lane needs a sub-role to resolve")
        try:
            return cls(key)
        except ValueError:
            return cls.UNKNOWN
