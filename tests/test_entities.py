from entities.life_item import LifeItemManager
from entities.obstacle import ObstacleManager
from entities.player import Player
from game.collision import CollisionHandler
from game.ui_manager import lives_text
from maze.maze_core import carve_passage, create_grid
from utils.constants import DOWN, LEFT, RIGHT, UP


def test_player_starts_top_left_with_full_lives():
    player = Player(max_lives=4)

    assert player.pos == (0, 0)
    assert player.lives == 4
    assert player.is_alive()


def test_player_move_only_through_open_walls():
    grid = create_grid(3, 3)
    carve_passage(grid, grid.cell(1, 1), RIGHT)
    player = Player(1, 1)

    assert grid.cell(1, 1).walls == [True, False, True, True]
    for blocked in (UP, DOWN, LEFT):
        assert player.move(blocked, grid) is False
        assert player.pos == (1, 1)

    assert player.move(RIGHT, grid) is True
    assert player.pos == (2, 1)
    assert player.moves == 1


def test_gain_life_is_capped():
    player = Player(max_lives=3)

    assert player.gain_life() is False
    assert player.lives == 3

    player.lose_life()
    assert player.gain_life() is True
    assert player.lives == 3


def test_lose_life_never_goes_negative():
    player = Player(max_lives=1)

    assert player.lose_life() is True
    assert player.lives == 0
    assert player.lose_life() is True
    assert player.lives == 0
    assert not player.is_alive()


def test_reset_position_restores_start_and_lives():
    player = Player(2, 2, max_lives=3)
    player.lose_life()
    player.moves = 7

    player.reset_position()

    assert player.pos == (0, 0)
    assert player.lives == 3
    assert player.moves == 0


def test_obstacle_hit_removes_obstacle_and_costs_a_life():
    manager = ObstacleManager()
    manager.add_obstacle(1, 0)
    manager.add_obstacle(2, 2)
    player = Player(1, 0, max_lives=3)

    hit = manager.check_trigger(1, 0, player)

    assert hit.pos == (1, 0)
    assert player.lives == 2
    assert manager.positions() == {(2, 2)}
    assert manager.check_trigger(1, 0, player) is None
    assert player.lives == 2


def test_life_item_is_used_up_even_at_full_lives():
    manager = LifeItemManager()
    manager.add_item(0, 1)
    player = Player(0, 1, max_lives=3)

    item = manager.collect_item(0, 1, player)

    assert item.pos == (0, 1)
    assert player.lives == 3
    assert len(manager) == 0


def test_collision_resolves_obstacle_before_life_item():
    obstacles = ObstacleManager()
    items = LifeItemManager()
    obstacles.add_obstacle(1, 1)
    items.add_item(1, 1)
    player = Player(1, 1, max_lives=3)

    result = CollisionHandler().check_player_position(player, obstacles, items, (2, 2))

    assert result['obstacle'] is not None
    assert result['life_item'] is None
    assert player.lives == 2
    assert len(items) == 1
    assert result['reached_goal'] is False


def test_collision_reports_death_and_goal():
    obstacles = ObstacleManager()
    items = LifeItemManager()
    obstacles.add_obstacle(0, 1)
    handler = CollisionHandler()

    dying = Player(0, 1, max_lives=1)
    result = handler.check_player_position(dying, obstacles, items, (2, 2))
    assert result['player_died'] is True
    assert dying.lives == 0

    at_goal = Player(2, 2)
    result = handler.check_player_position(at_goal, obstacles, items, (2, 2))
    assert result['reached_goal'] is True
    assert result['player_died'] is False


def test_lives_label_shows_current_and_max():
    player = Player(max_lives=5)
    player.lose_life()

    assert lives_text(player) == "Lives: 4/5"
