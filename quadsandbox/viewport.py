"""Views onto a tile map: a pan-and-zoom view and a camera view."""

from __future__ import annotations

from dataclasses import dataclass, field

MIN_SCALE = 0.1
MAX_SCALE = 10.0
PAN_SPEED = 500.0
CAMERA_PAN_SPEED = 100.0
ZOOM_IN_FACTOR = 1.1
ZOOM_OUT_FACTOR = 0.9
CAMERA_WINDOW_WIDTH = 1280
CAMERA_WINDOW_HEIGHT = 768


@dataclass
class MapView:
    """Scale and offset of a map drawn on screen.

    The offset never goes positive, so the map cannot be dragged past its
    top-left corner.
    """

    scale: float = 1.0
    pos_x: float = 0.0
    pos_y: float = 0.0

    def zoom_in(self, dt: float) -> None:
        self.scale = min(self.scale + dt, MAX_SCALE)

    def zoom_out(self, dt: float) -> None:
        self.scale = max(self.scale - dt, MIN_SCALE)

    def move_right(self, dt: float) -> None:
        self.pos_x -= PAN_SPEED * dt

    def move_left(self, dt: float) -> None:
        self.pos_x = min(self.pos_x + PAN_SPEED * dt, 0.0)

    def move_down(self, dt: float) -> None:
        self.pos_y -= PAN_SPEED * dt

    def move_up(self, dt: float) -> None:
        self.pos_y = min(self.pos_y + PAN_SPEED * dt, 0.0)

    def cell_size(
        self, map_width: int, map_height: int, window_width: int, window_height: int
    ) -> tuple[float, float]:
        """On-screen size of one tile: whole pixels per tile, times the scale."""
        if map_width <= 0 or map_height <= 0:
            raise ValueError("map dimensions must be positive")
        return (
            self.scale * (window_width // map_width),
            self.scale * (window_height // map_height),
        )


@dataclass
class CameraView:
    """A 2D camera looking at the centre of the window."""

    window_width: int = CAMERA_WINDOW_WIDTH
    window_height: int = CAMERA_WINDOW_HEIGHT
    target: tuple[float, float] = field(init=False)
    zoom: tuple[float, float] = field(init=False)

    def __post_init__(self) -> None:
        if self.window_width <= 0 or self.window_height <= 0:
            raise ValueError("window dimensions must be positive")
        self.target = (self.window_width / 2.0, self.window_height / 2.0)
        self.zoom = (2.0 / self.window_width, 2.0 / self.window_height)

    def _scale_zoom(self, factor: float) -> None:
        self.zoom = (self.zoom[0] * factor, self.zoom[1] * factor)

    def _pan(self, dx: float, dy: float) -> None:
        self.target = (self.target[0] + dx, self.target[1] + dy)

    def zoom_in(self, dt: float) -> None:
        self._scale_zoom(ZOOM_IN_FACTOR)

    def zoom_out(self, dt: float) -> None:
        self._scale_zoom(ZOOM_OUT_FACTOR)

    def move_left(self, dt: float) -> None:
        self._pan(-CAMERA_PAN_SPEED * dt, 0.0)

    def move_right(self, dt: float) -> None:
        self._pan(CAMERA_PAN_SPEED * dt, 0.0)

    def move_up(self, dt: float) -> None:
        self._pan(0.0, -CAMERA_PAN_SPEED * dt)

    def move_down(self, dt: float) -> None:
        self._pan(0.0, CAMERA_PAN_SPEED * dt)