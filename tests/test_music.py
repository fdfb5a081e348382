import pytest

from moonbeam.music import (
    INT16_MAX,
    INT16_MIN,
    MusicError,
    MusicPlayer,
    clamp_sample,
    volume_gain,
)

MIDI = b"MThd\x00\x00\x00\x06\x00\x00\x00\x01\x00\x60MTrk\x00\x00\x00\x04\x00\xff\x2f\x00"


class RecordingOutput:
    def __init__(self):
        self.calls = []
        self.loaded = None
        self.volume = None

    def load(self, data):
        self.loaded = data
        self.calls.append("load")

    def play(self, loop):
        self.calls.append(("play", loop))

    def stop(self):
        self.calls.append("stop")

    def pause(self):
        self.calls.append("pause")

    def set_volume(self, volume):
        self.volume = volume

    def close(self):
        self.calls.append("close")


def test_volume_gain_full_scale():
    assert volume_gain(127) == pytest.approx(100.0)


def test_volume_gain_silence():
    assert volume_gain(0) == 0


def test_volume_gain_is_monotonic():
    values = [volume_gain(v) for v in range(0, 128)]
    assert values == sorted(values)


def test_clamp_sample_limits():
    assert clamp_sample(INT16_MAX + 1000) == INT16_MAX
    assert clamp_sample(INT16_MIN - 1000) == INT16_MIN


def test_clamp_sample_truncates_toward_zero():
    assert clamp_sample(12.7) == 12
    assert clamp_sample(-12.7) == -12


def test_scale_samples_applies_gain_and_clamps():
    player = MusicPlayer()
    player.set_volume(127)
    result = player.scale_samples([1, 400, -400])
    assert result[1] == INT16_MAX
    assert result[2] == INT16_MIN
    assert result[0] == clamp_sample(player.volume)


def test_scale_samples_at_zero_volume_is_silent():
    player = MusicPlayer()
    assert player.scale_samples([100, -100, 5]) == [0, 0, 0]


def test_play_sets_state_and_volume():
    output = RecordingOutput()
    player = MusicPlayer(output)
    player.play(MIDI, loop=True)
    assert player.is_playing
    assert player.loop is True
    assert player.volume == pytest.approx(volume_gain(50))
    assert output.loaded == MIDI
    assert ("play", True) in output.calls


def test_play_without_loop():
    output = RecordingOutput()
    player = MusicPlayer(output)
    player.play(MIDI, loop=False)
    assert ("play", False) in output.calls
    assert player.loop is False


def test_play_rejects_bad_data():
    player = MusicPlayer()
    with pytest.raises(MusicError):
        player.play(b"not music at all", loop=True)
    assert not player.is_playing


def test_play_rejects_missing_data():
    player = MusicPlayer()
    with pytest.raises(MusicError):
        player.play(None, loop=True)


def test_stop_and_pause_clear_playing():
    output = RecordingOutput()
    player = MusicPlayer(output)
    player.play(MIDI)
    player.pause()
    assert not player.is_playing
    player.play(MIDI)
    player.stop()
    assert not player.is_playing
    assert output.calls[-1] == "stop"


def test_hooks_toggle():
    player = MusicPlayer()
    player.register_hook()
    assert player.is_hooked
    player.deregister_hook()
    assert not player.is_hooked


def test_close_prevents_play():
    output = RecordingOutput()
    player = MusicPlayer(output)
    player.play(MIDI)
    player.close()
    assert not player.is_playing
    assert output.calls[-1] == "close"
    with pytest.raises(MusicError):
        player.play(MIDI)