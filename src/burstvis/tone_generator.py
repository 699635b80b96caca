import logging

import librosa
import numpy as np

from burstvis.constants import (
    TONE_DURATION,
    TONE_END_FREQ,
    TONE_END_GAIN,
    TONE_SAMPLE_RATE,
    TONE_START_FREQ,
    TONE_START_GAIN,
)

logger = logging.getLogger(__name__)


class ToneGenerator:
    """
    Synthesises the short falling "whoosh" played for every burst.
    """

    def __init__(self, sample_rate=TONE_SAMPLE_RATE):
        self.sr = sample_rate
        self._samples = None

    def synthesize(self):
        """
        Exponential sweep from TONE_START_FREQ down to TONE_END_FREQ,
        shaped by an exponentially decaying gain envelope.
        The buffer is computed once and reused.
        """
        if self._samples is None:
            logger.debug(f"[+] Synthesising burst cue at {self.sr} Hz...")
            sweep = librosa.chirp(
                fmin=TONE_START_FREQ,
                fmax=TONE_END_FREQ,
                sr=self.sr,
                duration=TONE_DURATION,
                linear=False,
            )
            # Gain ramps geometrically from start to end over the cue
            progress = np.arange(len(sweep)) / len(sweep)
            envelope = TONE_START_GAIN * (TONE_END_GAIN / TONE_START_GAIN) ** progress
            self._samples = (sweep * envelope).astype(np.float32)
        return self._samples

    def play(self):
        """
        Start the cue on the default output device without blocking.
        Raises whatever the audio backend raises; callers decide how to cope.
        """
        # PortAudio is only loaded once a cue is actually played
        import sounddevice as sd

        sd.play(self.synthesize(), self.sr)
