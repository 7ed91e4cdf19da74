"""
Obstacle entities
Stepping on an obstacle costs the player one life and removes the obstacle
"""

from utils.colors import COLOR_OBSTACLE


class Obstacle:
    """
    Obstacle sitting on a single grid cell
    """
    def __init__(self, x, y):
        self.x = x
        self.y = y

    @property
    def pos(self):
        return (self.x, self.y)

    def get_color(self):
        """Get RGB color for rendering"""
        return COLOR_OBSTACLE

    def trigger(self, player):
        """
        Apply obstacle effect on player

        Returns:
            True if the hit killed the player
        """
        return player.lose_life()

    def is_at_position(self, x, y):
        """Check if obstacle is at given position"""
        return self.x == x and self.y == y

    def __repr__(self):
        return f"Obstacle(pos=({self.x},{self.y}))"


class ObstacleManager:
    """
    Manages all obstacles in a session
    """
    def __init__(self):
        self.obstacles = []

    def add_obstacle(self, x, y):
        """
        Add an obstacle to the session

        Returns:
            Obstacle object
        """
        obstacle = Obstacle(x, y)
        self.obstacles.append(obstacle)
        return obstacle

    def get_obstacle_at(self, x, y):
        """Get obstacle at position"""
        for obstacle in self.obstacles:
            if obstacle.is_at_position(x, y):
                return obstacle
        return None

    def check_trigger(self, x, y, player):
        """
        Trigger and remove the obstacle at position, if any

        Returns:
            Obstacle object if one was hit, None otherwise
        """
        obstacle = self.get_obstacle_at(x, y)
        if obstacle:
            self.obstacles.remove(obstacle)
            obstacle.trigger(player)
            return obstacle
        return None

    def positions(self):
        """Get set of occupied (x, y)"""
        return {o.pos for o in self.obstacles}

    def __len__(self):
        return len(self.obstacles)

    def __iter__(self):
        return iter(self.obstacles)

    def __repr__(self):
        return f"ObstacleManager(obstacles={len(self.obstacles)})"
