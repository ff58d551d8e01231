"""Chart widget."""

import asyncio
import random
from typing import Any, Dict, List, Optional

from widgetlink.core import get_logger
from widgetlink.registry import Handler
from .base import Widget

logger = get_logger(__name__)

CATEGORIES = ("A", "B", "C")


class ChartWidget(Widget):
    """
    Bar chart that regenerates its data asynchronously on request.

    Both setValue and updateChartData start a refresh; the arguments are
    accepted but not used. Data points are stored as a list under the
    chart's id.
    """

    type_name = "chart"

    def __init__(self, *args: Any, rng: Optional[random.Random] = None, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.rng = rng or random.Random()

    def handlers(self) -> Dict[str, Handler]:
        return {"setValue": self.refresh, "updateChartData": self.refresh}

    async def refresh(self, args: Dict[str, Any]) -> List[Dict[str, Any]]:
        """Wait the configured refresh delay, then store fresh data points."""
        logger.debug("chart_refresh_started", widget_id=self.id, args=args)
        await asyncio.sleep(self.settings.chart_refresh_delay)

        data = [{"name": name, "value": self.rng.random() * 100} for name in CATEGORIES]
        self.store.set(self.id, data)

        logger.debug("chart_refresh_completed", widget_id=self.id, points=len(data))
        return data

    def render(self) -> Dict[str, Any]:
        data = self.value if isinstance(self.value, list) else []
        return {
            "categories": [d["name"] for d in data],
            "series": [d["value"] for d in data],
        }
