"""
Audio cues.

AudioCues watches the window store and queues short synthesized tones when a
window opens or closes, plus a boot chime and a click. It only reads state.
"""
import array
import logging
import math
import time

import pygame

log = logging.getLogger(__name__)

SAMPLE_RATE = 22050

# (delay seconds, frequency, duration, wave, volume)
OPEN_CUE = [(0.0, 600, 0.10, "sine", 0.06), (0.06, 800, 0.10, "sine", 0.04)]
CLOSE_CUE = [(0.0, 500, 0.12, "sine", 0.05), (0.05, 350, 0.15, "sine", 0.03)]
BOOT_CUE = [(i * 0.12, f, 0.2, "sine", 0.05) for i, f in enumerate((523, 659, 784, 1047))]
CLICK_CUE = [(0.0, 1000, 0.04, "square", 0.03)]


def tone_samples(freq, duration, wave="sine", volume=0.08, rate=SAMPLE_RATE, channels=1):
    """Signed 16-bit samples, each frame repeated across ``channels``."""
    n = max(1, int(rate * duration))
    samples = array.array("h")
    # exponential ramp down to 0.001 of the start gain over the tone
    decay = math.log(0.001 / volume) / n if volume > 0.001 else 0.0
    for i in range(n):
        phase = math.sin(2 * math.pi * freq * i / rate)
        if wave == "square":
            phase = 1.0 if phase >= 0 else -1.0
        gain = volume * math.exp(decay * i)
        samples.extend([int(32767 * gain * phase)] * channels)
    return samples


class MixerPlayer:
    """Plays tones through pygame.mixer; silent if no audio device is present.

    Tones are built for whatever format the mixer runs at, since pygame.init()
    may already have opened it with its own rate and channel count.
    """

    def __init__(self):
        self.enabled = True
        self._cache = {}
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=1)
            self.rate, size, self.channels = pygame.mixer.get_init()
        except pygame.error as e:
            log.warning("Audio disabled: %s", e)
            self.enabled = False
            return
        if size != -16:
            log.warning("Audio disabled: mixer sample format %s is not signed 16-bit", size)
            self.enabled = False

    def sound(self, freq, duration, wave, volume):
        key = (freq, duration, wave, volume)
        snd = self._cache.get(key)
        if snd is None:
            samples = tone_samples(freq, duration, wave, volume, self.rate, self.channels)
            snd = pygame.mixer.Sound(buffer=samples.tobytes())
            self._cache[key] = snd
        return snd

    def play(self, freq, duration, wave, volume):
        if self.enabled:
            self.sound(freq, duration, wave, volume).play()


class AudioCues:
    def __init__(self, player=None, muted=False, clock=time.monotonic):
        self.player = player
        self.muted = muted
        self.clock = clock
        self._queue = []

    def attach(self, store):
        store.on_boot(self.play_boot)
        return store.subscribe(self.on_window_change)

    def on_window_change(self, window_id, before, after):
        if not before.is_open and after.is_open:
            self._schedule(OPEN_CUE)
        elif before.is_open and not after.is_open:
            self._schedule(CLOSE_CUE)

    def play_boot(self):
        self._schedule(BOOT_CUE)

    def play_click(self):
        self._schedule(CLICK_CUE)

    def _schedule(self, cue):
        if self.muted:
            return
        now = self.clock()
        for delay, freq, duration, wave, volume in cue:
            self._queue.append((now + delay, freq, duration, wave, volume))
        self.update(now)

    def update(self, now=None):
        """Play every queued tone whose start time has come."""
        now = self.clock() if now is None else now
        due = [t for t in self._queue if t[0] <= now]
        if not due:
            return 0
        self._queue = [t for t in self._queue if t[0] > now]
        if self.player is None:
            self.player = MixerPlayer()
        for _, freq, duration, wave, volume in sorted(due):
            self.player.play(freq, duration, wave, volume)
        return len(due)

    def toggle_mute(self):
        self.muted = not self.muted
        if self.muted:
            self._queue = []
        return self.muted
