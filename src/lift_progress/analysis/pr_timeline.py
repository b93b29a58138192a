"""Milestone timeline of significant personal records."""

from typing import Iterable, List

from ..models import OTHER_BODY_PART, PRGroup, PRTimelineItem


DEFAULT_TIMELINE_LIMIT = 10
SIGNIFICANT_PR_MIN_REPS = 5


def build_pr_timeline(
    pr_groups: Iterable[PRGroup],
    limit: int = DEFAULT_TIMELINE_LIMIT,
    min_reps: int = SIGNIFICANT_PR_MIN_REPS,
) -> List[PRTimelineItem]:
    """Max-weight PRs with at least ``min_reps`` reps, newest first."""
    timeline: List[PRTimelineItem] = []

    for group in pr_groups:
        mark = group.prs.max_weight
        if mark is None or mark.reps < min_reps:
            continue
        timeline.append(
            PRTimelineItem(
                exercise=group.exercise,
                equipment=group.equipment,
                body_part=group.body_part or OTHER_BODY_PART,
                weight=mark.weight,
                reps=mark.reps,
                date=mark.date,
                location=mark.location,
            )
        )

    timeline.sort(key=lambda item: item.date, reverse=True)
    return timeline[:max(limit, 0)]
