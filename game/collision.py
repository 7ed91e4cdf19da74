"""
Collision detection and handling
"""


class CollisionHandler:
    """
    Resolves what happens on the cell the player just stepped onto
    """
    def check_player_position(self, player, obstacle_manager, life_item_manager, goal_pos):
        """
        Check player's current position for collisions with entities

        At most one entity is resolved per move: an obstacle wins over a
        life item. Reaching the goal is checked independently.

        Args:
            player: Player object
            obstacle_manager: ObstacleManager object
            life_item_manager: LifeItemManager object
            goal_pos: (x, y) of the goal cell

        Returns:
            Dictionary with collision results:
            {
                'obstacle': Obstacle or None,
                'life_item': LifeItem or None,
                'player_died': bool,
                'reached_goal': bool
            }
        """
        result = {
            'obstacle': None,
            'life_item': None,
            'player_died': False,
            'reached_goal': False
        }

        px, py = player.x, player.y

        # Check obstacle hit
        obstacle = obstacle_manager.check_trigger(px, py, player)
        if obstacle:
            result['obstacle'] = obstacle
            result['player_died'] = not player.is_alive()
        else:
            # Check life item pickup
            item = life_item_manager.collect_item(px, py, player)
            if item:
                result['life_item'] = item

        # Check goal
        if (px, py) == tuple(goal_pos):
            result['reached_goal'] = True

        return result
