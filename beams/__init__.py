"""Beam spacing computation, diagram layout, and SVG generation."""
