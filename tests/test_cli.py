from grocery_inventory.__main__ import demo_items, main
from grocery_inventory.items.models import Item
from grocery_inventory.report import EMPTY_MESSAGE, render_table


def test_render_table_columns():
    text = render_table([Item("Apple", 10, 10), Item("Organic Avocado", -1, 3)])
    lines = text.splitlines()
    assert lines[0].split() == ["name", "sellIn", "quality"]
    assert lines[2].split() == ["Apple", "10", "10"]
    assert lines[3].startswith("Organic Avocado")
    assert lines[3].split()[-2:] == ["-1", "3"]


def test_render_table_empty():
    assert render_table([]) == EMPTY_MESSAGE


def test_demo_items_are_fresh_copies():
    first = demo_items()
    first[0].quality = 0
    assert demo_items()[0] == Item("Apple", 10, 10)


def test_main_prints_each_day(capsys):
    assert main(["--days", "2"]) == 0
    out = capsys.readouterr().out
    assert "Day 0" in out
    assert "Day 1" in out
    assert "Cheddar Cheese" in out


def test_main_rejects_bad_config(tmp_path):
    path = tmp_path / "rules.yaml"
    path.write_text("default_kind: mystery\n", encoding="utf-8")
    assert main(["--config", str(path)]) == 2
