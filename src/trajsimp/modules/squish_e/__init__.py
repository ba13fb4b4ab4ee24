from .buffer import BufferEntry, BufferState, PriorityBuffer
from .compressor import SquishECompressor

__all__ = ["BufferEntry", "BufferState", "PriorityBuffer", "SquishECompressor"]
