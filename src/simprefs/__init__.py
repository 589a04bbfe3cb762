"""Editable preferences of the particle simulation desktop tool."""
