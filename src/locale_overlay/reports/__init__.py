"""Report renderers for ``OverlayReport``."""
