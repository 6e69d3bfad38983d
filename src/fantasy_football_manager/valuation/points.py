from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)


def points_from_stats(stat_line: Mapping[str, float], stat_points: Mapping[str, float]) -> float:
    """Fantasy points for a per-stat line, e.g. ``{"rec": 6, "rec_yd": 84, "rec_td": 1}``.

    Stats with no configured point value contribute nothing.
    """
    total = 0.0
    for stat, amount in stat_line.items():
        per_unit = stat_points.get(stat)
        if per_unit is None:
            logger.debug("No point value for stat %r, ignoring", stat)
            continue
        total += float(amount) * per_unit
    return total
