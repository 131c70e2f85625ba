"""Team side enumeration."""
from enum import Enum


class Side(Enum):
    """Map side of a team; the value is the Riot team id."""

    BLUE = 100
    RED = 200

    @property
    def label(self) -> str:
        return "Blue Team" if self is Side.BLUE else "Red Team"

    @classmethod
    def from_team_id(cls, team_id: int) -> 'Side':
        """Team 100 is blue; every other id is the opposing side."""
        return cls.BLUE if team_id == cls.BLUE.value else cls.RED
