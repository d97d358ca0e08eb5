"""A* steering for snake-like agents on a grid."""
