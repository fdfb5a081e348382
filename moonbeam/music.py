"""Background music: a MIDI player with volume scaling and looping."""

from __future__ import annotations

import io
import logging
from typing import Iterable, Protocol

SAMPLE_RATE = 44100
INT16_MAX = 32767
INT16_MIN = -32768
DEFAULT_VOLUME = 50

_MUSIC_SIGNATURES = (b"MThd", b"RIFF", b"FORM", b"MUS\x1a")

_log = logging.getLogger(__name__)


class MusicError(Exception):
    """Raised when music data cannot be opened or played."""


class MusicOutput(Protocol):
    """Where decoded music goes: a sound device or anything that acts like one."""

    def load(self, data: bytes) -> None: ...

    def play(self, loop: bool) -> None: ...

    def stop(self) -> None: ...

    def pause(self) -> None: ...

    def set_volume(self, volume: float) -> None: ...

    def close(self) -> None: ...


class PygameMusicOutput:
    """Plays MIDI data through ``pygame.mixer.music``; the mixer must be initialised."""

    def __init__(self) -> None:
        import pygame

        self._music = pygame.mixer.music
        self._error = pygame.error

    def load(self, data: bytes) -> None:
        try:
            self._music.load(io.BytesIO(data), "mid")
        except self._error as exc:
            raise MusicError(f"Couldn't open music file: {exc}") from exc

    def play(self, loop: bool) -> None:
        self._music.play(-1 if loop else 0)

    def stop(self) -> None:
        self._music.stop()

    def pause(self) -> None:
        self._music.pause()

    def set_volume(self, volume: float) -> None:
        self._music.set_volume(volume)

    def close(self) -> None:
        self._music.stop()
        self._music.unload()


def volume_gain(new_volume: float) -> float:
    """Sample gain for a 0-127 volume: ``100 * (volume / 127) ** 2``."""
    return 100 * (new_volume / 127) ** 2


def clamp_sample(value: float) -> int:
    """Clamp to the signed 16-bit range and truncate toward zero."""
    return int(min(max(value, INT16_MIN), INT16_MAX))


def _looks_like_music(data: bytes) -> bool:
    return any(data.startswith(signature) for signature in _MUSIC_SIGNATURES)


class MusicPlayer:
    """Tracks playback state and volume, and drives an optional output."""

    def __init__(self, output: MusicOutput | None = None) -> None:
        self.output = output
        self.volume = 0.0
        self.loop = False
        self.is_playing = False
        self.is_hooked = False
        self.closed = False

    def set_volume(self, new_volume: float) -> None:
        """Set the volume on a 0-127 scale."""
        self.volume = volume_gain(new_volume)
        if self.output is not None:
            self.output.set_volume(min(1.0, self.volume))

    def scale_samples(self, samples: Iterable[float]) -> list[int]:
        """Apply the current gain to 16-bit samples, clamping each one."""
        return [clamp_sample(sample * self.volume) for sample in samples]

    def play(self, data: bytes | None, loop: bool = True) -> None:
        """Open ``data`` as a song and start it, looping if asked."""
        if self.closed:
            raise MusicError("music player is closed")
        if not data or not _looks_like_music(bytes(data)):
            raise MusicError("Couldn't open music file: invalid or empty music data")
        if self.output is not None:
            self.output.load(bytes(data))
        self.set_volume(DEFAULT_VOLUME)
        self.loop = bool(loop)
        if self.output is not None:
            self.output.play(self.loop)
        self.is_playing = True

    def stop(self) -> None:
        if self.output is not None:
            self.output.stop()
        self.is_playing = False

    def pause(self) -> None:
        if self.output is not None:
            self.output.pause()
        self.is_playing = False

    def register_hook(self) -> None:
        self.is_hooked = True

    def deregister_hook(self) -> None:
        self.is_hooked = False

    def close(self) -> None:
        """Release the output; the player cannot play afterwards."""
        if self.closed:
            return
        if self.output is not None:
            self.output.close()
        self.is_playing = False
        self.closed = True