import logging

import cv2
import numpy as np
from moviepy import VideoClip
from moviepy.audio.AudioClip import AudioArrayClip

from burstvis.scene_controller import SceneController
from burstvis.surface import Canvas
from burstvis.timers import FrameScheduler, ManualClock
from burstvis.tone_generator import ToneGenerator

logger = logging.getLogger(__name__)


class CueTrack:
    """
    Stands in for the speaker while recording: remembers when each burst
    cue was played so the cues can be mixed into the soundtrack afterwards.
    """

    def __init__(self, tone, clock):
        self.tone = tone
        self.clock = clock
        self.cue_times = []

    def play(self):
        self.cue_times.append(self.clock())

    def mixdown(self, duration):
        """Stereo float32 array of every cue laid out on a silent track."""
        samples = self.tone.synthesize()
        total = int(round(duration * self.tone.sr))
        track = np.zeros(total + len(samples), dtype=np.float32)

        for cue_time in self.cue_times:
            start = int(round(cue_time * self.tone.sr))
            track[start : start + len(samples)] += samples

        track = np.clip(track[:total], -1.0, 1.0)
        return np.column_stack([track, track])


class ShowRecorder:
    """
    Renders an auto-firing show offline, frame by frame, for MoviePy.
    The show is seeded, so running it twice gives the same frames.
    """

    def __init__(self, width, height, fps, duration, seed=None, with_audio=True):
        self.w = width
        self.h = height
        self.fps = fps
        self.duration = duration
        self.with_audio = with_audio
        self.seed = seed if seed is not None else int(np.random.default_rng().integers(2**32))
        self.tone = ToneGenerator()
        self.reset()

    def reset(self):
        """Start the show again from t=0 with the same seed."""
        self.clock = ManualClock()
        self.track = CueTrack(self.tone, self.clock)
        self.scene = SceneController(
            Canvas(self.w, self.h),
            FrameScheduler(self.clock),
            tone=self.track,
            rng=np.random.default_rng(self.seed),
        )
        self.scene.initialize()
        self.scene.start_auto_fire()

        self.frames_rendered = 0
        self.last_frame = None

    @property
    def total_frames(self):
        return int(round(self.duration * self.fps))

    def make_frame(self, t):
        """
        The callback function for MoviePy.
        Steps the simulation up to the frame for time t and returns it as RGB.
        MoviePy may ask for the same t more than once; that doesn't re-step.
        """
        target = int(round(t * self.fps))
        while self.frames_rendered <= target:
            self.clock.set(self.frames_rendered / self.fps)
            self.scene.tick()
            self.frames_rendered += 1
            self.last_frame = cv2.cvtColor(self.scene.canvas.frame, cv2.COLOR_BGR2RGB)
        return self.last_frame

    def audio_clip(self):
        return AudioArrayClip(self.track.mixdown(self.duration), fps=self.tone.sr)

    def write(self, output):
        logger.info(f"[+] Preparing render: {self.w}x{self.h} @ {self.fps}fps (seed {self.seed})")
        logger.info(f"[+] Duration: {self.duration:.2f} seconds")

        audio_clip = None
        if self.with_audio:
            # Cue times are only known after a dry run of the whole show
            logger.info("[+] Simulating show for the soundtrack...")
            for i in range(self.total_frames):
                self.make_frame(i / self.fps)
            audio_clip = self.audio_clip()
            logger.info(f"[i] {len(self.track.cue_times)} bursts in the show")
            self.reset()

        video_clip = VideoClip(self.make_frame, duration=self.duration)
        if audio_clip is not None:
            video_clip = video_clip.with_audio(audio_clip)

        logger.info("[+] Rendering video... (This may take a while)")
        video_clip.write_videofile(
            output,
            fps=self.fps,
            codec="libx264",
            audio_codec="aac",
            threads=4,
            preset="medium",
            logger="bar",
        )
        logger.info(f"[+] Done! Saved to {output}")
