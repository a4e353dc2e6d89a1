"""
Room module for isohotel.

Defines the Room and GameObject records describing one isometric room.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from isohotel.game.models import Position


class ObjectKind(str, Enum):
    """Category of a placed object."""

    FURNITURE = "furniture"
    DECORATION = "decoration"
    INTERACTIVE = "interactive"
    DOOR = "door"


class GameObject(BaseModel):
    """
    An object placed on the floor of a room.

    Attributes:
        id: Unique identifier within the room (e.g., "door-1")
        kind: Object category
        name: Display name (e.g., "Porta")
        position: Top-left cell of the footprint
        width: Footprint extent along x, in cells
        height: Footprint extent along y, in cells
        color: Fill color used by the renderer
        interactive: Whether the renderer highlights the object as clickable
        target_room_id: For doors, the room the door leads to
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Unique object identifier")
    kind: ObjectKind = Field(..., description="Object category")
    name: str = Field(default="", description="Display name")
    position: Position = Field(..., description="Top-left footprint cell")
    width: int = Field(default=1, ge=1, description="Footprint width in cells")
    height: int = Field(default=1, ge=1, description="Footprint height in cells")
    color: str = Field(default="#8B4513", description="Fill color")
    interactive: bool = Field(default=False, description="Whether the object is interactive")
    target_room_id: str | None = Field(default=None, description="Door destination room id")

    def occupies(self, position: Position) -> bool:
        """
        Check whether a cell lies inside this object's footprint.

        Args:
            position: The cell to test

        Returns:
            True if ``position`` is covered by the object
        """
        return (
            self.position.x <= position.x < self.position.x + self.width
            and self.position.y <= position.y < self.position.y + self.height
        )

    def cells(self) -> list[Position]:
        """Get every cell covered by the footprint."""
        return [
            Position(x=self.position.x + dx, y=self.position.y + dy)
            for dy in range(self.height)
            for dx in range(self.width)
        ]

    def is_door(self) -> bool:
        """Check if this object is a door leading somewhere."""
        return self.kind is ObjectKind.DOOR and self.target_room_id is not None


class Room(BaseModel):
    """
    Represents a room (an isometric floor) in the game world.

    Attributes:
        id: Unique identifier for the room (e.g., "room-1")
        name: Display name shown above the canvas (e.g., "Meu Quarto")
        width: Number of columns
        height: Number of rows
        objects: Objects placed on the floor
        floor_color: Tile fill color
        wall_color: Wall fill color
        background_image: Optional background asset reference
        spawn_position: Cell the player is placed at on entering the room
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Unique room identifier")
    name: str = Field(..., description="Display name of the room")
    width: int = Field(..., ge=1, description="Grid columns")
    height: int = Field(..., ge=1, description="Grid rows")
    objects: tuple[GameObject, ...] = Field(default=(), description="Objects on the floor")
    floor_color: str = Field(default="#E5F3FF", description="Floor tile color")
    wall_color: str = Field(default="#BFDBFE", description="Wall color")
    background_image: str | None = Field(default=None, description="Background asset reference")
    spawn_position: Position | None = Field(default=None, description="Entry cell")

    def contains(self, position: Position) -> bool:
        """Check if a cell lies within the room's grid extent."""
        return 0 <= position.x < self.width and 0 <= position.y < self.height

    def object_at(self, position: Position) -> GameObject | None:
        """
        Get the object covering a cell.

        Args:
            position: The cell to look up

        Returns:
            The first object whose footprint covers the cell, or None
        """
        for obj in self.objects:
            if obj.occupies(position):
                return obj
        return None

    def doors(self) -> list[GameObject]:
        """Get all doors in this room that lead to another room."""
        return [obj for obj in self.objects if obj.is_door()]
