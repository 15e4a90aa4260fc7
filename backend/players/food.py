"""
Food locator - pick the food item to head for this turn.
"""

from typing import Optional, Sequence

from domain.coord import Coord, manhattan
from services.move_trace import TraceEvent, Tracer, log_trace


def nearest_food(head: Coord, foods: Sequence[Coord], tracer: Tracer = log_trace) -> Optional[Coord]:
    """
    Return the closest food by Manhattan distance, or None if there is none.

    Foods are scanned in the given order. A food one step away ends the scan
    right there; otherwise the first food at the smallest distance wins.
    """
    best: Optional[Coord] = None
    best_dist = None
    for food in foods:
        dist = manhattan(head, food)
        if dist == 1:
            best, best_dist = food, dist
            break
        if best_dist is None or dist < best_dist:
            best, best_dist = food, dist

    if best is not None:
        tracer(TraceEvent("target_selected", {"target": best, "distance": best_dist}))
    return best
