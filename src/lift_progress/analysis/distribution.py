"""Training volume share by body part."""

import math
from datetime import date
from typing import Dict, Union

from ..models import (
    OTHER_BODY_PART,
    BodyPartDistribution,
    DistributionSlice,
    ProgressMap,
    TimeRange,
)
from .stats import get_date_cutoff


PALETTE = [
    "#1dd3b0",  # teal
    "#5856d6",  # purple
    "#ff9500",  # orange
    "#ff6b6b",  # coral
    "#4cd964",  # green
    "#007aff",  # blue
    "#ffcc00",  # yellow
    "#8e8e93",  # gray
]


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def build_distribution(
    progress: ProgressMap,
    time_range: Union[TimeRange, str, None],
    today: date,
) -> BodyPartDistribution:
    """Sum session volume per body part inside the window, largest first."""
    cutoff = get_date_cutoff(time_range, today)
    volume_by_part: Dict[str, float] = {}

    for entry in progress.values():
        body_part = entry.body_part or OTHER_BODY_PART
        for session in entry.sessions:
            if cutoff and session.date < cutoff:
                continue
            volume_by_part[body_part] = volume_by_part.get(body_part, 0) + (session.total_volume or 0)

    ranked = sorted(volume_by_part.items(), key=lambda item: item[1], reverse=True)
    total = sum(volume for _, volume in ranked)

    slices = [
        DistributionSlice(
            body_part=body_part,
            total_volume=volume,
            percentage=round_half_up(volume / total * 100) if total > 0 else 0,
            color_index=index % len(PALETTE),
        )
        for index, (body_part, volume) in enumerate(ranked)
    ]

    return BodyPartDistribution(
        labels=[s.body_part for s in slices],
        data=[s.total_volume for s in slices],
        percentages=[s.percentage for s in slices],
        colors=[PALETTE[s.color_index] for s in slices],
        total=total,
        slices=slices,
    )
