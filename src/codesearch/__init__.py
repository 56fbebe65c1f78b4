"""Line-level semantic code search backed by Qdrant."""

__version__ = "0.1.0"
