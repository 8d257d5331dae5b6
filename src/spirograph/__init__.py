"""Interactive spirograph: four sliders driving a reactively recomputed curve."""
__version__ = "0.1.0"
