# supervision_engine/core/capacity.py

"""
Fill-rate aggregation for supervision slots.
Counts available supervisors per slot, compares them to the required
count and rolls the result up into session-wide statistics.
"""

from typing import Dict, Iterable, List, Optional, Sequence, Tuple
from collections import defaultdict

from .models import (
    FillStatus,
    SessionCapacitySummary,
    Slot,
    SlotWithStats,
    Submission,
)
from ..config import CapacityConfig, get_logger
from ..config import config as engine_config

logger = get_logger("capacity")

AvailabilityKey = Tuple[str, str]  # (supervisor_identity, slot_id)


def build_availability_map(
    submissions: Iterable[Submission],
) -> Dict[AvailabilityKey, bool]:
    """
    Index every declared flag by (supervisor identity, slot id).

    Duplicate pairs are a data error; the last entry seen wins.
    """
    availability: Dict[AvailabilityKey, bool] = {}
    duplicates = 0
    for submission in submissions:
        identity = submission.supervisor_identity
        for entry in submission.entries:
            key = (identity, entry.slot_id)
            if key in availability:
                duplicates += 1
            availability[key] = entry.is_available

    if duplicates:
        logger.debug(f"{duplicates} duplicate availability entries overwritten")
    return availability


def availability_for(
    availability_map: Dict[AvailabilityKey, bool], identity: str, slot_id: str
) -> Optional[bool]:
    """True/False when the supervisor answered for the slot, None when they did not."""
    return availability_map.get((identity, slot_id))


def count_available_slots(submission: Submission) -> int:
    """Number of distinct slots a single submission declares available."""
    latest: Dict[str, bool] = {}
    for entry in submission.entries:
        latest[entry.slot_id] = entry.is_available
    return sum(1 for available in latest.values() if available)


def effective_capacity(slot: Slot) -> Optional[int]:
    """Required count usable as a divisor, or None when capacity is not defined.

    Zero and negative counts are treated exactly like a missing count.
    """
    if slot.required_count is None or slot.required_count <= 0:
        return None
    return slot.required_count


def classify_fill_ratio(
    fill_ratio: Optional[float], config: Optional[CapacityConfig] = None
) -> FillStatus:
    """Map a fill ratio (percent) to its status tier."""
    if fill_ratio is None:
        return FillStatus.UNDEFINED

    cfg = config or engine_config.capacity
    if fill_ratio < cfg.critical_threshold:
        return FillStatus.CRITICAL
    elif fill_ratio < cfg.ok_threshold:
        return FillStatus.ALERT
    else:
        return FillStatus.OK


def compute_slot_stats(
    slots: Sequence[Slot],
    submissions: Sequence[Submission],
    config: Optional[CapacityConfig] = None,
) -> List[SlotWithStats]:
    """
    Compute per-slot availability, fill ratio and status.

    One output row per input slot, in input order.
    """
    cfg = config or engine_config.capacity
    availability = build_availability_map(submissions)

    available_per_slot: Dict[str, int] = defaultdict(int)
    for (_identity, slot_id), is_available in availability.items():
        if is_available:
            available_per_slot[slot_id] += 1

    results: List[SlotWithStats] = []
    for slot in slots:
        available_count = available_per_slot.get(slot.id, 0)
        capacity = effective_capacity(slot)

        fill_ratio: Optional[float] = None
        if capacity is not None:
            fill_ratio = available_count / capacity * 100

        results.append(
            SlotWithStats(
                slot=slot,
                available_count=available_count,
                fill_ratio=fill_ratio,
                status=classify_fill_ratio(fill_ratio, cfg),
                capacity_defined=capacity is not None,
            )
        )

    logger.debug(
        f"Computed stats for {len(results)} slots from {len(submissions)} submissions"
    )
    return results


def compute_session_summary(
    slots_with_stats: Sequence[SlotWithStats],
) -> SessionCapacitySummary:
    """Roll per-slot stats up into session-wide counts and the average fill ratio."""
    defined = [s for s in slots_with_stats if s.capacity_defined]
    if not defined:
        return SessionCapacitySummary()

    counts: Dict[FillStatus, int] = defaultdict(int)
    total_ratio = 0.0
    for stats in defined:
        counts[stats.status] += 1
        total_ratio += stats.fill_ratio or 0.0

    return SessionCapacitySummary(
        slots_with_capacity_defined=len(defined),
        critical_count=counts[FillStatus.CRITICAL],
        alert_count=counts[FillStatus.ALERT],
        ok_count=counts[FillStatus.OK],
        average_fill_ratio=total_ratio / len(defined),
    )
