import pytest

from blockfall.renderables import Color, Renderable, Renderables


class Recorder(Renderable):
    def __init__(self, name, log):
        super().__init__()
        self.name = name
        self.log = log

    def render(self, renderer, debug):
        self.log.append((self.name, renderer, debug))


def test_renderable_is_abstract():
    with pytest.raises(TypeError):
        Renderable()


def test_renderable_starts_visible_and_can_be_hidden():
    collection = Renderables()
    collection.append(Recorder("a", []))
    (stored,) = list(collection)
    assert stored.visible is True
    stored.visible = False
    (again,) = list(collection)
    assert again.visible is False


def test_empty_collection_has_no_items():
    collection = Renderables()
    assert len(collection) == 0
    assert list(collection) == []


def test_append_keeps_order():
    log = []
    first, second = Recorder("first", log), Recorder("second", log)
    collection = Renderables()
    collection.append(first)
    collection.append(second)
    assert len(collection) == 2
    assert list(collection) == [first, second]


def test_render_all_draws_in_insertion_order():
    log = []
    collection = Renderables()
    for name in ("a", "b", "c"):
        collection.append(Recorder(name, log))
    collection.render_all("screen", True)
    assert log == [("a", "screen", True), ("b", "screen", True), ("c", "screen", True)]


def test_render_all_on_empty_collection_draws_nothing():
    collection = Renderables()
    collection.render_all("screen", False)
    assert len(collection) == 0
    assert list(collection) == []


def test_color_lookup_by_value():
    assert Color("indigo") is Color.INDIGO
    with pytest.raises(ValueError):
        Color("black")