"""The game state, its drawing, and the command that runs the window."""

from __future__ import annotations

import argparse
import logging
from typing import Any

from moonbeam.archive import PackFile, PackFileError, default_pack_path
from moonbeam.music import MusicError, MusicPlayer, PygameMusicOutput
from moonbeam.player import Controls, Player
from moonbeam.raycast import (
    BLACK,
    REFRESH_RATE,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    Color,
    Frame,
    cast_frame,
    parallax_bands,
)
from moonbeam.world import WorldMap, default_world

MUSIC_LUMP = "music.mid"

_log = logging.getLogger(__name__)


def _lerp_color(top: Color, bottom: Color, t: float) -> Color:
    return tuple(int(a + (b - a) * t) for a, b in zip(top, bottom))  # type: ignore[return-value]


def _gradient_rect(surface: Any, x: int, y: int, width: int, height: int, top: Color, bottom: Color) -> None:
    import pygame

    if width <= 0 or height <= 0:
        return
    first = max(y, 0)
    last = min(y + height, surface.get_height())
    span = max(height - 1, 1)
    for row in range(first, last):
        color = _lerp_color(top, bottom, (row - y) / span)
        pygame.draw.line(surface, color, (x, row), (x + width - 1, row))


class Game:
    """The running game: player, world, music and what gets drawn each frame."""

    def __init__(
        self,
        pack: PackFile | None = None,
        world: WorldMap | None = None,
        music: MusicPlayer | None = None,
        screen_width: int = SCREEN_WIDTH,
        screen_height: int = SCREEN_HEIGHT,
    ) -> None:
        self.pack = pack
        self.world = world if world is not None else default_world()
        self.music = music if music is not None else MusicPlayer()
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.player = Player()
        self.started = False
        self.min_height = 0

    def start(self) -> None:
        """Place the player and start the looping music."""
        self.player.reset()
        try:
            if self.pack is None:
                raise KeyError(MUSIC_LUMP)
            self.music.play(self.pack.lump_for_name(MUSIC_LUMP), loop=True)
        except KeyError:
            _log.warning("no %s lump; playing without music", MUSIC_LUMP)
        except MusicError as exc:
            _log.warning("%s", exc)
        self.started = True

    def update(self, controls: Controls, frame_time: float) -> None:
        """Advance one frame; the first frame only starts the game."""
        if not self.started:
            self.start()
            return
        self.player.think(controls, frame_time, self.world, self.screen_height)

    def draw(self, surface: Any) -> Frame | None:
        """Draw floor, ceiling and walls onto ``surface``; nothing before start."""
        import pygame

        if not self.started:
            return None
        surface.fill(BLACK)
        bands = parallax_bands(self.player, self.min_height, self.screen_width, self.screen_height)
        _gradient_rect(surface, 0, bands.ceiling_y, bands.width, bands.ceiling_height, *bands.ceiling_colors)
        _gradient_rect(surface, 0, bands.floor_y, bands.width, bands.floor_height, *bands.floor_colors)
        frame = cast_frame(self.player, self.world, self.screen_width, self.screen_height)
        for column in frame.columns:
            pygame.draw.line(surface, column.color, (column.x, column.start), (column.x, column.end))
        self.min_height = frame.min_height
        return frame


def controls_from_keys(pressed: Any) -> Controls:
    """Build controls from a pygame key state indexed by key constants."""
    import pygame

    return Controls(
        forward=bool(pressed[pygame.K_w]),
        backward=bool(pressed[pygame.K_s]),
        strafe_left=bool(pressed[pygame.K_a]),
        strafe_right=bool(pressed[pygame.K_d]),
        turn_left=bool(pressed[pygame.K_j]),
        turn_right=bool(pressed[pygame.K_l]),
        look_up=bool(pressed[pygame.K_i]),
        look_down=bool(pressed[pygame.K_k]),
        run=bool(pressed[pygame.K_LSHIFT]),
    )


def _open_music() -> MusicPlayer:
    import pygame

    try:
        pygame.mixer.init(frequency=44100, size=-16, channels=2, buffer=4096)
    except pygame.error as exc:
        _log.warning("no audio device: %s", exc)
        return MusicPlayer()
    return MusicPlayer(PygameMusicOutput())


def main(argv: list[str] | None = None) -> int:
    """Run the game window until it is closed."""
    parser = argparse.ArgumentParser(prog="moonbeam", description="A 90s style raycasting game.")
    parser.add_argument("--pack", help="path of the pack file (default: data.mpk next to the program)")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(message)s")
    try:
        pack = PackFile.open(args.pack or default_pack_path())
    except PackFileError as exc:
        print(exc)
        return 1

    import pygame

    pygame.init()
    music = MusicPlayer()
    try:
        surface = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption("Moonbeam")
        music = _open_music()
        clock = pygame.time.Clock()
        game = Game(pack=pack, music=music)
        frame_time = 0.0
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
            game.update(controls_from_keys(pygame.key.get_pressed()), frame_time)
            game.draw(surface)
            pygame.display.flip()
            frame_time = clock.tick(REFRESH_RATE) / 1000
    finally:
        music.close()
        pack.close()
        pygame.quit()
    return 0