"""Per-slot helpers shared by unpack and explore."""

from concurrent.futures import ThreadPoolExecutor


def selected(slot: int, slots) -> bool:
    """No selection means every slot."""
    return slots is None or slot in slots


def map_slots(func, blobs, jobs: int = 1):
    """
    Call func(id, blob) for every slot, results in slot order.
    Slots share nothing, so with jobs > 1 they are processed in threads.
    """
    items = list(enumerate(blobs))
    if jobs is None or jobs <= 1 or len(items) <= 1:
        return [func(i, blob) for i, blob in items]
    with ThreadPoolExecutor(max_workers=jobs) as pool:
        return list(pool.map(lambda item: func(*item), items))
