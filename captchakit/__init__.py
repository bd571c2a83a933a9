"""Generate slide and rotate image captchas and check slide, rotate and click answers."""

__version__ = "2.0.4"