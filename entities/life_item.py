"""
Life item entities
Players collect life items to win back a lost life
"""

from utils.colors import COLOR_LIFE_ITEM


class LifeItem:
    """
    Life item sitting on a single grid cell
    """
    def __init__(self, x, y):
        self.x = x
        self.y = y

    @property
    def pos(self):
        return (self.x, self.y)

    def get_color(self):
        """Get RGB color based on type"""
        return COLOR_LIFE_ITEM

    def collect(self, player):
        """
        Apply life item to player. The item is used up even when the
        player already has full lives.

        Returns:
            True if the player gained a life
        """
        return player.gain_life()

    def is_at_position(self, x, y):
        """Check if life item is at given position"""
        return self.x == x and self.y == y

    def __repr__(self):
        return f"LifeItem(pos=({self.x},{self.y}))"


class LifeItemManager:
    """
    Manages all life items in a session
    """
    def __init__(self):
        self.items = []

    def add_item(self, x, y):
        """
        Add a life item to the session

        Returns:
            LifeItem object
        """
        item = LifeItem(x, y)
        self.items.append(item)
        return item

    def get_item_at(self, x, y):
        """Get life item at position"""
        for item in self.items:
            if item.is_at_position(x, y):
                return item
        return None

    def collect_item(self, x, y, player):
        """
        Collect and remove the life item at position

        Args:
            x, y: Position to check
            player: Player object

        Returns:
            LifeItem object if collected, None otherwise
        """
        item = self.get_item_at(x, y)
        if item:
            self.items.remove(item)
            item.collect(player)
            return item
        return None

    def positions(self):
        """Get set of occupied (x, y)"""
        return {i.pos for i in self.items}

    def __len__(self):
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def __repr__(self):
        return f"LifeItemManager(items={len(self.items)})"
