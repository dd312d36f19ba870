import datetime
import logging

from until_wall.animation import PULSE_FRAMES, sequence
from until_wall.dates import DayCounts, classify
from until_wall.document import compose, to_svg
from until_wall.geometry import GridPlan, plan
from until_wall.request import RenderRequest
from until_wall.shapes import VectorDocument

logger = logging.getLogger(__name__)


class LifeCalendar:
    """Lays out and composes one calendar for a request and a given "today"."""

    def __init__(
        self,
        request: RenderRequest,
        *,
        today: datetime.date | datetime.datetime | None = None,
        frame_count: int = PULSE_FRAMES,
    ) -> None:
        self.REQUEST: RenderRequest = request
        self.TODAY: datetime.date | datetime.datetime = today or datetime.date.today()  # noqa: DTZ011
        self.FRAME_COUNT: int = frame_count
        self.COUNTS: DayCounts = classify(request.start_date, request.end_date, self.TODAY)
        self.GRID: GridPlan = plan(request, self.COUNTS)

    def gen_document(self) -> VectorDocument:
        return compose(self.REQUEST, self.GRID, self.COUNTS)

    def gen_frames(self) -> list[VectorDocument]:
        return sequence(self.gen_document(), self.FRAME_COUNT)

    def gen_svg(self) -> str:
        return to_svg(self.gen_document())

    def render(self) -> VectorDocument | list[VectorDocument]:
        if self.REQUEST.output_format.is_animated:
            return self.gen_frames()
        return self.gen_document()


def render(
    request: RenderRequest,
    today: datetime.date | datetime.datetime | None = None,
) -> VectorDocument | list[VectorDocument]:
    """One document for still formats, the pulse frames for animated ones."""
    logger.debug("Rendering %s for %s", request.output_format.value, today or "today")
    return LifeCalendar(request, today=today).render()
