"""Accuracy calculation for character practice counters."""


def calculate_accuracy(correct: int, incorrect: int) -> float:
    """Get the percentage of correct attempts.

    Args:
        correct: Number of correct attempts
        incorrect: Number of incorrect attempts

    Returns:
        Accuracy in the range 0-100, or 0 when there are no attempts
    """
    total = correct + incorrect
    return correct / total * 100 if total > 0 else 0.0
