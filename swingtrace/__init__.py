"""
SwingTrace

Golf swing trajectory and phase analysis from pose-estimation output.
"""

__version__ = "1.0.0"
