"""
Game flow - sessions, collisions, state machine and HUD
"""
