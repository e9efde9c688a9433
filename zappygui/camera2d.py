"""Two-dimensional camera and its screen/world conversions."""

import math
from dataclasses import dataclass

from zappygui.matrix import Matrix
from zappygui.vector3 import Vector3


@dataclass(frozen=True)
class Camera2D:
    """2D camera: ``target`` in the world appears at ``offset`` on screen.

    ``rotation`` is in degrees.
    """

    offset: tuple = (0.0, 0.0)
    target: tuple = (0.0, 0.0)
    rotation: float = 0.0
    zoom: float = 1.0

    def matrix(self):
        """The camera transform matrix."""
        tx, ty = self.target
        ox, oy = self.offset
        origin = Matrix.translate(-tx, -ty, 0.0)
        rotation = Matrix.rotate((0.0, 0.0, 1.0), math.radians(self.rotation))
        scale = Matrix.scale(self.zoom, self.zoom, 1.0)
        translation = Matrix.translate(ox, oy, 0.0)
        return origin.multiply(scale.multiply(rotation)).multiply(translation)

    def screen_to_world(self, position):
        """World position shown at a screen position."""
        x, y = position
        point = Vector3(x, y, 0.0).transform(self.matrix().invert())
        return (point.x, point.y)

    def world_to_screen(self, position):
        """Screen position of a world position."""
        x, y = position
        point = Vector3(x, y, 0.0).transform(self.matrix())
        return (point.x, point.y)