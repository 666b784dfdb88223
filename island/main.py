"""
Island - a palm tree island in a rising sea, rained on by a wandering cloud.
"""

import argparse
import logging
import sys
import time
from dataclasses import dataclass

import numpy as np

from .cloud import Cloud
from .config import FRAME_RATE
from .drips import DripPool
from .errors import IslandError
from .render import Compositor
from .terminal import (
    CLEAR_HOME,
    RESET,
    AnsiWriter,
    TerminalExtent,
    enable_windows_ansi,
    hide_cursor,
    show_cursor,
)
from .water import SurfaceField

logger = logging.getLogger(__name__)


@dataclass
class Scene:
    field: SurfaceField
    drips: DripPool
    cloud: Cloud

    @classmethod
    def create(cls, extent, rng=None, shared_impact_column=False):
        return cls(
            field=SurfaceField(extent.width, extent.height),
            drips=DripPool(extent, shared_impact_column=shared_impact_column),
            cloud=Cloud(extent, rng=rng),
        )


def step_frame(scene, extent):
    """Advance the simulation by one frame."""
    # Resize first so nothing below reads stale columns
    if extent.changed:
        scene.field.reinitialize(extent.width, extent.height)
    scene.drips.advance(scene.field)
    scene.cloud.advance(scene.drips)
    scene.field.step()


def run(extent, sink, fps=FRAME_RATE, frames=0, rng=None, shared_impact_column=False):
    """Animate until interrupted, or for ``frames`` frames when it is non-zero."""
    extent.poll()
    scene = Scene.create(extent, rng=rng, shared_impact_column=shared_impact_column)
    compositor = Compositor()
    logger.info(f"Starting at {extent.width}x{extent.height}, {fps} fps")

    frame = 0
    while True:
        step_frame(scene, extent)
        compositor.render(scene.field, scene.drips, scene.cloud, extent, sink)
        sink.flush()

        frame += 1
        if frames and frame >= frames:
            return scene

        time.sleep(1 / fps)
        extent.poll()


def setup_logging(level=logging.WARNING, log_file=None):
    """Route package logs to a file; stdout belongs to the animation."""
    package_logger = logging.getLogger("island")

    # Repeat calls replace the handler instead of stacking another one
    if package_logger.hasHandlers():
        for old in package_logger.handlers:
            old.close()
        package_logger.handlers.clear()

    if log_file:
        handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
    else:
        handler = logging.NullHandler()
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    return handler


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="island", description="Island in a rising sea, for your terminal"
    )
    parser.add_argument("--fps", type=float, default=FRAME_RATE, help="Frames per second")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for cloud drift")
    parser.add_argument(
        "--frames", type=int, default=0, help="Stop after this many frames (0 = run forever)"
    )
    parser.add_argument(
        "--shared-impact-column",
        action="store_true",
        help="Every drip splashes into the first pooled drip's column",
    )
    parser.add_argument("--log-file", default=None, help="Write debug logs here")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    args = parser.parse_args(argv)
    if args.fps <= 0:
        parser.error("--fps must be positive")
    return args


def main(argv=None):
    args = parse_args(argv)
    setup_logging(getattr(logging, args.log_level), args.log_file)
    rng = np.random.default_rng(args.seed)

    enable_windows_ansi()
    hide_cursor()

    error = None
    try:
        run(
            TerminalExtent(),
            AnsiWriter(),
            fps=args.fps,
            frames=args.frames,
            rng=rng,
            shared_impact_column=args.shared_impact_column,
        )
    except KeyboardInterrupt:
        pass
    except (IslandError, MemoryError) as e:
        logger.exception("Animation aborted")
        error = e
    finally:
        sys.stdout.write(RESET)
        sys.stdout.write(CLEAR_HOME)
        show_cursor()
        sys.stdout.flush()

    if error is not None:
        print(f"island: {str(error) or type(error).__name__}", file=sys.stderr)
        return 1
    print("Island ended.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
