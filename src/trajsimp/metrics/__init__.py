from .distance import sed, ped
from .stats import calculate_sed_stats
from .compression import calculate_compression_ratio, calculate_kept_fraction

__all__ = ["sed", "ped", "calculate_sed_stats", "calculate_compression_ratio", "calculate_kept_fraction"]
