"""Clipping of geometry to the edges of a bounding box."""