from .buffer import CostEntry, SlidingCostBuffer
from .compressor import STTraceCompressor

__all__ = ["CostEntry", "SlidingCostBuffer", "STTraceCompressor"]
