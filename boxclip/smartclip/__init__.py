"""Clipping that closes rings and polygons around the bounding box."""