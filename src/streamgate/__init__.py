"""StreamGate — per-vhost connection admission for media-streaming servers."""

__version__ = "0.1.0"
