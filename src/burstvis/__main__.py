#!/usr/bin/env python3
"""
Fireworks
=========

An interactive particle fireworks show in an OpenCV window.

Click anywhere to launch a burst. The buttons along the bottom (or the
keys a / s / c) toggle auto-fire, stop it, and clear the sky. q or Esc quits.

The same show can be rendered headless to a video file instead, with
auto-fire on and a soundtrack made of the burst cues.

Usage:
    python -m burstvis
    python -m burstvis --width 1920 --height 1080 --mute
    python -m burstvis --record show.mp4 --duration 20 --seed 7
"""

import argparse
import logging
import sys

import numpy as np

from burstvis.constants import DEFAULT_FPS, DEFAULT_RESOLUTION
from burstvis.recorder import ShowRecorder
from burstvis.scene_controller import SceneController
from burstvis.surface import Canvas
from burstvis.timers import FrameScheduler
from burstvis.tone_generator import ToneGenerator
from burstvis.window import FireworksWindow

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(description="Interactive particle fireworks.")
    parser.add_argument("--width", type=int, default=DEFAULT_RESOLUTION[0], help="Window width")
    parser.add_argument("--height", type=int, default=DEFAULT_RESOLUTION[1], help="Window height")
    parser.add_argument("--fps", type=int, default=DEFAULT_FPS, help="Frames per second")
    parser.add_argument("--seed", type=int, help="Random seed (optional)")
    parser.add_argument("--mute", action="store_true", help="Don't play burst sounds")
    parser.add_argument("--record", metavar="OUTPUT", help="Render an auto-fire show to a video file")
    parser.add_argument("--duration", type=float, help="Length of the recorded show in seconds")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser


def run_window(args):
    scene = SceneController(
        Canvas(args.width, args.height),
        FrameScheduler(),
        tone=None if args.mute else ToneGenerator(),
        rng=np.random.default_rng(args.seed),
    )
    window = FireworksWindow(scene, args.fps)
    window.open()
    try:
        window.run()
    finally:
        window.close()


def run_recorder(args):
    recorder = ShowRecorder(
        args.width,
        args.height,
        args.fps,
        args.duration,
        seed=args.seed,
        with_audio=not args.mute,
    )
    recorder.write(args.record)


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
    )

    # 1. Validation
    if args.width <= 0 or args.height <= 0:
        parser.error("--width and --height must be positive")
    if args.fps <= 0:
        parser.error("--fps must be positive")
    if args.record and (args.duration is None or args.duration <= 0):
        parser.error("--record needs a positive --duration")

    # 2. Run
    logger.info("[+] Fireworks app starting...")
    try:
        if args.record:
            run_recorder(args)
        else:
            run_window(args)
    except KeyboardInterrupt:
        logger.info("[i] Interrupted")
    except Exception as e:
        logger.exception("[!] Fireworks failed")
        sys.exit(f"[!] Error starting fireworks: {e}")


if __name__ == "__main__":
    main()
