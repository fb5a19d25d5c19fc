"""Data models shared by the loader and the three sync phases."""
