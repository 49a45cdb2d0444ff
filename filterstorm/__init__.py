"""Classic image filters over BGR numpy images: smoothing, edges, tone mapping and histogram equalization."""

__version__ = "0.1.0"