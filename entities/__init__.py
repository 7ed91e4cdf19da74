"""
Entities - player, obstacles and life items
"""
