import io

from spacefactory.cli import dispatch, main, parse_and_dispatch, parse_command
from spacefactory.commands import Command
from spacefactory.item import Item
from spacefactory.recipe import Recipe


def test_parse_command_key_values():
    command = parse_command("add_recipe --item_id 1 --item_count 5\n")
    assert command == Command("add_recipe", {"item_id": "1", "item_count": "5"})


def test_parse_command_blank_line_returns_none():
    assert parse_command("   \n") is None


def test_parse_command_flag_without_value(capsys):
    command = parse_command("save_recipes --force --location out.sgs")
    assert command.args == {"force": "", "location": "out.sgs"}
    assert "Added flag force with no value" in capsys.readouterr().out


def test_parse_command_trailing_flag(capsys):
    command = parse_command("view_recipes --all")
    assert command.args == {"all": ""}
    assert "Added flag all with no value" in capsys.readouterr().out


def test_parse_command_stray_word(capsys):
    command = parse_command("view_recipes stray --k v")
    assert command.args == {"k": "v"}
    assert 'Word did not have "--" in front of it: stray' in capsys.readouterr().out


def test_parse_command_later_key_overrides():
    command = parse_command("cmd --k a --k b")
    assert command.args == {"k": "b"}


def test_dispatch_is_case_insensitive():
    recipes = []
    dispatch(Command("ADD_Recipe", {"item_id": "1", "item_count": "2"}), recipes)
    assert recipes[0].input_items == [Item(id=1, count=2)]


def test_dispatch_unknown_command(capsys):
    recipes = [Recipe()]
    dispatch(Command("fly"), recipes)
    assert recipes == [Recipe()]
    assert "Unknown command3" in capsys.readouterr().out


def test_parse_and_dispatch_blank_line(capsys):
    recipes = []
    parse_and_dispatch("\n", recipes)
    assert recipes == []
    assert "Unknown Command2" in capsys.readouterr().out


def test_parse_and_dispatch_adds_recipe():
    recipes = []
    parse_and_dispatch("add_recipe --item_id 2 --item_count 9", recipes)
    assert recipes == [Recipe(input_items=[Item(id=2, count=9)])]


def test_parse_and_dispatch_save_and_load(tmp_path):
    location = tmp_path / "r.sgs"
    recipes = []
    parse_and_dispatch("add_recipe --item_id 1 --item_count 3", recipes)
    parse_and_dispatch(f"save_recipes --location {location}", recipes)
    restored = []
    parse_and_dispatch(f"load_recipes --location {location}", restored)
    assert restored == recipes


def test_main_stops_at_exit(monkeypatch, capsys):
    monkeypatch.setattr(
        "sys.stdin",
        io.StringIO("add_recipe --item_id 1 --item_count 2\nexit\nview_recipes\n"),
    )
    assert main() == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Enter your command. Type exit to exit program"
    assert lines[1] == repr(Recipe(input_items=[Item(id=1, count=2)]))
    assert len(lines) == 2


def test_main_stops_at_end_of_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("bogus\n"))
    assert main([]) == 0
    assert "Unknown command3" in capsys.readouterr().out