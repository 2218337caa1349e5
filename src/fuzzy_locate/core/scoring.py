"""Score function combining character errors with location drift."""


def bitap_score(
    errors: int,
    x: int,
    loc: int,
    pattern_length: int,
    distance: float,
) -> float:
    """Score a candidate match; 0.0 is perfect, higher is worse.

    Args:
        errors: Number of character errors in the candidate.
        x: Start index of the candidate in the text.
        loc: Expected location.
        pattern_length: Length of the pattern (must be positive).
        distance: Location tolerance. 0 means any drift scores 1.0.

    Returns:
        ``errors / pattern_length`` plus the location penalty.
    """
    accuracy = errors / pattern_length
    proximity = abs(loc - x)
    if not distance:
        # No tolerance for drift at all
        return accuracy if proximity == 0 else 1.0
    return accuracy + proximity / distance
