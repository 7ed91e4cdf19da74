"""
Maze model - grid, generator, configuration and entity placement
"""
