"""Named ARGB colours, box colliders, collision dispatch, a camera controller and buffered input for 2.5D games."""

__version__ = "0.1.0"