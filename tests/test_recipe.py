import pytest

from spacefactory.inventory import Inventory
from spacefactory.item import ItemBuilder
from spacefactory.recipe import Recipe


def _item(count, item_id):
    return ItemBuilder().set_count(count).set_id(item_id).build()


def _inventory(*items):
    inv = Inventory()
    inv.add_multiple(items)
    return inv


def test_default_values():
    recipe = Recipe()
    assert recipe.name == "Default"
    assert recipe.input_items == []
    assert recipe.output_items == []
    assert recipe.power_draw == 1
    assert recipe.heat_produced == 1
    assert recipe.processing_time == 1


def test_set_get_input_items():
    recipe = Recipe()
    recipe.input_items = [_item(5, 1), _item(4, 2)]
    assert recipe.input_items == [_item(5, 1), _item(4, 2)]


def test_set_get_output_items():
    recipe = Recipe()
    recipe.output_items = [_item(5, 1), _item(4, 2)]
    assert recipe.output_items == [_item(5, 1), _item(4, 2)]


def test_set_get_scalars():
    recipe = Recipe(processing_time=4, heat_produced=4, power_draw=4)
    assert (recipe.processing_time, recipe.heat_produced, recipe.power_draw) == (4, 4, 4)


@pytest.mark.parametrize(
    "inventory_items, recipe_items, expected",
    [
        ([(50, 1), (25, 2)], [(10, 1), (5, 2)], True),
        ([], [(10, 1), (5, 2)], False),
        ([(5, 1), (4, 2)], [(10, 1), (5, 2)], False),
        ([(20, 1), (4, 2)], [(10, 1), (5, 2)], False),
        ([(20, 2)], [(0, 1), (5, 2)], True),
        ([(20, 1), (5, 2)], [(5, 1)], True),
        ([(20, 1), (5, 2)], [], True),
        ([], [], True),
    ],
)
def test_can_be_produced(inventory_items, recipe_items, expected):
    inv = _inventory(*(_item(c, i) for c, i in inventory_items))
    recipe = Recipe(input_items=[_item(c, i) for c, i in recipe_items])
    assert recipe.can_be_produced(inv) is expected


@pytest.mark.parametrize(
    "items, expected",
    [
        ([(20, 1), (0, 2)], [(20, 1)]),
        ([(20, 1)], [(20, 1)]),
        ([(0, 1)], []),
        ([(20, 1), (20, 2)], [(20, 1), (20, 2)]),
    ],
)
def test_input_items_as_transport_order(items, expected):
    recipe = Recipe(input_items=[_item(c, i) for c, i in items])
    order = recipe.input_items_as_transport_order()
    assert order.items == [_item(c, i) for c, i in expected]
    assert order.saturate_inv is True


@pytest.mark.parametrize(
    "items, expected",
    [
        ([(20, 1), (0, 2)], [(20, 1)]),
        ([(20, 1)], [(20, 1)]),
        ([(0, 1)], []),
        ([(20, 1), (20, 2)], [(20, 1), (20, 2)]),
    ],
)
def test_output_items_as_transport_order(items, expected):
    recipe = Recipe(output_items=[_item(c, i) for c, i in items])
    order = recipe.output_items_as_transport_order()
    assert order.items == [_item(c, i) for c, i in expected]


def test_transport_order_items_are_copies():
    recipe = Recipe(output_items=[_item(3, 1)])
    order = recipe.output_items_as_transport_order()
    order.items[0].count = 100
    assert recipe.output_items == [_item(3, 1)]