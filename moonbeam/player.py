"""The player: position, view direction, camera plane and per-frame movement."""

from __future__ import annotations

import math
from dataclasses import dataclass

from moonbeam.world import WorldMap

MOVE_SPEED = 5.0
ROTATE_SPEED = 2.5
RUN_FACTOR = 1.5


@dataclass(frozen=True)
class Controls:
    """Which actions are held down during a frame."""

    forward: bool = False
    backward: bool = False
    strafe_left: bool = False
    strafe_right: bool = False
    turn_left: bool = False
    turn_right: bool = False
    look_up: bool = False
    look_down: bool = False
    run: bool = False


@dataclass
class Player:
    """Position in tiles, facing direction, camera plane and vertical aim."""

    pos_x: float = 0.0
    pos_y: float = 0.0
    ang_x: float = 0.0
    ang_y: float = 0.0
    ang_z: float = 0.0
    plane_x: float = 0.0
    plane_y: float = 0.0
    old_ang_x: float = 0.0
    old_plane_x: float = 0.0

    def reset(self) -> None:
        """Place the player at the start tile looking along negative x."""
        self.pos_x = self.pos_y = 3.0
        self.ang_x = -1.0
        self.ang_y = 0.0
        self.plane_x = 0.0
        self.plane_y = 0.66

    def think(self, controls: Controls, frame_time: float, world: WorldMap, screen_height: int) -> None:
        """Apply one frame of movement, turning and vertical aim."""
        move_speed = MOVE_SPEED * frame_time
        rot_speed = ROTATE_SPEED * frame_time
        if controls.run:
            move_speed *= RUN_FACTOR
            rot_speed *= RUN_FACTOR

        if controls.forward:
            self._try_move(world, self.ang_x * move_speed, self.ang_y * move_speed)
        if controls.backward:
            self._try_move(world, -self.ang_x * move_speed, -self.ang_y * move_speed)
        if controls.strafe_left:
            self._try_move(world, -self.plane_x * move_speed, -self.plane_y * move_speed)
        if controls.strafe_right:
            self._try_move(world, self.plane_x * move_speed, self.plane_y * move_speed)

        if controls.turn_left:
            self._rotate(rot_speed)
        if controls.turn_right:
            self._rotate(-rot_speed)

        half = screen_height // 2
        if controls.look_up and self.ang_z < half:
            self.ang_z += rot_speed * screen_height / 2
        if controls.look_down and self.ang_z > -half:
            self.ang_z -= rot_speed * screen_height / 2

    def _try_move(self, world: WorldMap, dx: float, dy: float) -> None:
        if world.is_empty(int(self.pos_x + dx), int(self.pos_y + dy)):
            self.pos_x += dx
            self.pos_y += dy

    def _rotate(self, angle: float) -> None:
        cos_a, sin_a = math.cos(angle), math.sin(angle)
        self.old_ang_x = self.ang_x
        self.old_plane_x = self.plane_x
        self.ang_x = self.ang_x * cos_a - self.ang_y * sin_a
        self.ang_y = self.old_ang_x * sin_a + self.ang_y * cos_a
        self.plane_x = self.plane_x * cos_a - self.plane_y * sin_a
        self.plane_y = self.old_plane_x * sin_a + self.plane_y * cos_a