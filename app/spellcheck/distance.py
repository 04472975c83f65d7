MAX_EDIT_DISTANCE = 2


def levenshtein_distance(source: str, target: str, max_distance: int = MAX_EDIT_DISTANCE) -> int:
    """Bounded Levenshtein distance.

    Anything beyond max_distance is reported as max_distance + 1. Only one DP
    row over the shorter string is kept, and the fill stops as soon as a whole
    row is over budget since costs never decrease along a path.
    """
    over_budget = max_distance + 1

    if source == target:
        return 0
    if len(source) < len(target):
        source, target = target, source
    if len(source) - len(target) > max_distance:
        return over_budget
    if not target:
        return len(source)

    previous = list(range(len(target) + 1))
    for i, source_char in enumerate(source, start=1):
        current = [i]
        row_min = i
        for j, target_char in enumerate(target, start=1):
            cost = 0 if source_char == target_char else 1
            value = min(
                previous[j] + 1,
                current[j - 1] + 1,
                previous[j - 1] + cost,
            )
            current.append(value)
            if value < row_min:
                row_min = value

        if row_min > max_distance:
            return over_budget
        previous = current

    distance = previous[-1]
    return distance if distance <= max_distance else over_budget


def confidence_for_distance(distance: int) -> int:
    return max(0, 100 - distance * 25)
