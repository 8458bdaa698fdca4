import pytest

from scheduler import (
    ButtonDirection,
    ClassicScheduler,
    DirectionAwareScheduler,
    ElevatorDirection,
    FloorCommand,
    get_scheduler,
)
from scheduler.utils import is_between, sort_commands_in_direction, travel_direction

UP = ButtonDirection.UP
DOWN = ButtonDirection.DOWN


class TestFloorCommand:
    def test_equality_is_by_value(self):
        assert FloorCommand(3, UP) == FloorCommand(3, UP)
        assert FloorCommand(3, UP) != FloorCommand(3, DOWN)
        assert len({FloorCommand(3, UP), FloorCommand(3, UP)}) == 1

    def test_direction_is_coerced_from_text(self):
        command = FloorCommand(4, "down")
        assert command.direction is DOWN

    @pytest.mark.parametrize(
        "token, expected",
        [
            ("9:down", FloorCommand(9, DOWN)),
            ("6 up", FloorCommand(6, UP)),
            ("3U", FloorCommand(3, UP)),
            ("2,d", FloorCommand(2, DOWN)),
        ],
    )
    def test_parse(self, token, expected):
        assert FloorCommand.parse(token) == expected

    @pytest.mark.parametrize("token", ["", "up", "9:sideways"])
    def test_parse_rejects_garbage(self, token):
        with pytest.raises(ValueError):
            FloorCommand.parse(token)

    def test_from_dict_requires_floor_and_direction(self):
        assert FloorCommand.from_dict({"floor": "7", "direction": "up"}) == FloorCommand(7, UP)
        with pytest.raises(ValueError, match="direction"):
            FloorCommand.from_dict({"floor": 7})

    @pytest.mark.parametrize("data", [5, "9:down", None, {"floor": None, "direction": "up"}])
    def test_from_dict_rejects_non_objects(self, data):
        with pytest.raises(ValueError):
            FloorCommand.from_dict(data)

    def test_to_dict(self):
        assert FloorCommand(5, DOWN).to_dict() == {"floor": 5, "direction": "down"}


class TestUtils:
    def test_travel_direction(self):
        assert travel_direction(1, 9) is ElevatorDirection.UP
        assert travel_direction(9, 1) is ElevatorDirection.DOWN
        assert travel_direction(4, 4) is ElevatorDirection.DOWN

    def test_is_between_is_exclusive_and_order_free(self):
        assert is_between(5, 2, 9)
        assert is_between(5, 9, 2)
        assert not is_between(2, 2, 9)
        assert not is_between(9, 2, 9)

    def test_sort_commands_in_direction(self):
        commands = [FloorCommand(4, DOWN), FloorCommand(7, DOWN), FloorCommand(5, DOWN)]
        assert [c.floor for c in sort_commands_in_direction(commands, ElevatorDirection.UP)] == [4, 5, 7]
        assert [c.floor for c in sort_commands_in_direction(commands, ElevatorDirection.DOWN)] == [7, 5, 4]


class TestStrategies:
    pending = [
        FloorCommand(6, UP),
        FloorCommand(3, UP),
        FloorCommand(7, DOWN),
        FloorCommand(4, DOWN),
        FloorCommand(9, UP),
    ]

    def test_classic_collects_same_direction_calls_in_ascending_order(self):
        stops = ClassicScheduler().intervening_stops(1, 9, ElevatorDirection.UP, self.pending)
        assert stops == [FloorCommand(3, UP), FloorCommand(6, UP)]

    def test_classic_keeps_ascending_order_on_the_way_down(self):
        stops = ClassicScheduler().intervening_stops(9, 2, ElevatorDirection.DOWN, self.pending)
        assert stops == [FloorCommand(4, DOWN), FloorCommand(7, DOWN)]

    def test_direction_aware_orders_downward_stops_descending(self):
        stops = DirectionAwareScheduler().intervening_stops(9, 2, ElevatorDirection.DOWN, self.pending)
        assert stops == [FloorCommand(7, DOWN), FloorCommand(4, DOWN)]

    def test_strategies_do_not_mutate_pending(self):
        pending = list(self.pending)
        ClassicScheduler().intervening_stops(1, 9, ElevatorDirection.UP, pending)
        assert pending == self.pending

    def test_registry(self):
        assert isinstance(get_scheduler("Classic"), ClassicScheduler)
        assert isinstance(get_scheduler("direction_aware"), DirectionAwareScheduler)
        with pytest.raises(ValueError, match="Available"):
            get_scheduler("nearest_car")
