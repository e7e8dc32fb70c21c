"""Fractal explorer with Mandelbrot, Julia and magnet sets, an XPM reader and text helpers."""

__version__ = "0.1.0"