import logging
import math

from until_wall.shapes import VectorDocument

logger = logging.getLogger(__name__)

PULSE_FRAMES: int = 15  # half a second at FPS
FPS: int = 30
MIN_SCALE: float = 1.0
MAX_SCALE: float = 1.5


def pulse_scale(
    frame: int,
    frame_count: int = PULSE_FRAMES,
    min_scale: float = MIN_SCALE,
    max_scale: float = MAX_SCALE,
) -> float:
    """Sine ease-in/ease-out pulse, one full cycle over ``frame_count`` frames.

    Starts and ends at ``min_scale`` so the sequence loops without a jump.
    """
    progress = frame / frame_count * 2 * math.pi
    return min_scale + (math.sin(progress - math.pi / 2) + 1) / 2 * (max_scale - min_scale)


def sequence(document: VectorDocument, frame_count: int = PULSE_FRAMES) -> list[VectorDocument]:
    if frame_count <= 0:
        return []
    if document.current_marker is None:
        logger.debug("No current day marker, all %d frames are static", frame_count)
        return [document] * frame_count

    return [
        document.with_current_marker_scaled(pulse_scale(frame, frame_count))
        for frame in range(frame_count)
    ]
