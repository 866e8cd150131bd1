"""Pydantic schemas for values crossing the engine boundary."""
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, Tuple

from ..config import Settings, get_settings


class DisplayBounds(BaseModel):
    """Display area available for the board, UI chrome already removed."""
    model_config = ConfigDict(frozen=True)

    width: float = Field(..., gt=0, description="Usable width")
    height: float = Field(..., gt=0, description="Usable height")
    left: float = Field(default=0, ge=0, description="Area origin x on screen")
    top: float = Field(default=0, ge=0, description="Area origin y on screen")

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height

    @classmethod
    def from_screen(
        cls,
        screen_width: float,
        screen_height: float,
        settings: Optional[Settings] = None,
    ) -> "DisplayBounds":
        """
        Build bounds from a full screen size.

        The reserved top band (header) and bottom band (controls) are removed
        from the height; the area starts below the top band.

        Args:
            screen_width: Full screen width.
            screen_height: Full screen height.
            settings: Optional settings override.

        Returns:
            DisplayBounds for the board area.
        """
        settings = settings or get_settings()
        return cls(
            width=screen_width,
            height=screen_height - settings.reserved_top - settings.reserved_bottom,
            left=0,
            top=settings.reserved_top,
        )


class CandidateRectangle(BaseModel):
    """Rectangle reported by the gesture layer, corners in any order."""
    model_config = ConfigDict(frozen=True)

    start_row: int = Field(..., ge=0, description="Row of the first corner")
    start_col: int = Field(..., ge=0, description="Column of the first corner")
    end_row: int = Field(..., ge=0, description="Row of the opposite corner")
    end_col: int = Field(..., ge=0, description="Column of the opposite corner")

    def normalized(self) -> Tuple[int, int, int, int]:
        """Return (r1, c1, r2, c2) with r1 <= r2 and c1 <= c2."""
        return (
            min(self.start_row, self.end_row),
            min(self.start_col, self.end_col),
            max(self.start_row, self.end_row),
            max(self.start_col, self.end_col),
        )


class GenerateRequest(BaseModel):
    """Validated arguments for a board generation call."""
    level: int = Field(default=1, description="Level number (values below 1 clamp to 1)")
    seed: Optional[str] = Field(default=None, description="Seed label; derived when omitted")
    is_challenge: bool = Field(default=False, description="Generate a challenge board")
    screen_width: Optional[float] = Field(default=None, gt=0, description="Full screen width")
    screen_height: Optional[float] = Field(default=None, gt=0, description="Full screen height")
