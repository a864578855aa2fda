from .accuracy import calculate_distance_excess, calculate_accuracy_stats

__all__ = ["calculate_distance_excess", "calculate_accuracy_stats"]
