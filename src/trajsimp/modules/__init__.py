from .base import Compressor
from .squish_e import SquishECompressor
from .sttrace import STTraceCompressor

__all__ = ["Compressor", "SquishECompressor", "STTraceCompressor"]
