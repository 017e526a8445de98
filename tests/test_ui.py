import pygame
import pytest

from galaxus.ui import Button, Label, SpriteElement, UIElement, UIManager


@pytest.fixture(scope="module")
def font():
    pygame.font.init()
    return pygame.font.Font(None, 24)


def _click(pos, button=1):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=button, pos=pos)


def _full_button(font, callback, size=(800, 600)):
    button = Button(font, "Play", callback)
    button.set_relative_bounds((0.0, 0.0), (1.0, 1.0))
    button.resize(size)
    return button


def test_button_fills_window_when_anchored_to_whole(font):
    button = _full_button(font, None)
    assert button.global_bounds() == pygame.Rect(0, 0, 800, 600)


def test_button_click_inside_runs_callback(font):
    clicks = []
    button = _full_button(font, lambda: clicks.append(True))
    assert button.handle_event(_click((10, 10))) is True
    assert clicks == [True]


def test_button_click_outside_is_ignored(font):
    clicks = []
    button = _full_button(font, lambda: clicks.append(True), size=(100, 100))
    assert button.handle_event(_click((150, 150))) is False
    assert clicks == []


def test_button_right_click_is_ignored(font):
    clicks = []
    button = _full_button(font, lambda: clicks.append(True))
    assert button.handle_event(_click((10, 10), button=3)) is False
    assert clicks == []


@pytest.mark.parametrize("attribute", ["enabled", "visible"])
def test_disabled_or_hidden_button_ignores_click(font, attribute):
    clicks = []
    button = _full_button(font, lambda: clicks.append(True))
    setattr(button, attribute, False)
    assert button.handle_event(_click((10, 10))) is False
    assert clicks == []


def test_button_without_resize_has_empty_bounds(font):
    button = Button(font, "Play", None)
    assert button.global_bounds().size == (0, 0)
    assert button.handle_event(_click((0, 0))) is False


def test_button_draws_fill_and_outline(font):
    surface = pygame.Surface((100, 100))
    surface.fill((255, 255, 255))
    button = _full_button(font, None, size=(100, 100))
    button.draw(surface)
    assert surface.get_at((0, 0))[:3] == (0, 0, 0)
    assert surface.get_at((4, 4))[:3] == (100, 100, 100)


def test_hidden_button_draws_nothing(font):
    surface = pygame.Surface((100, 100))
    surface.fill((255, 255, 255))
    button = _full_button(font, None, size=(100, 100))
    button.visible = False
    button.draw(surface)
    assert surface.get_at((4, 4))[:3] == (255, 255, 255)


def test_sprite_scales_to_anchored_area():
    sprite = SpriteElement(pygame.Surface((10, 10)))
    sprite.set_relative_bounds((0.0, 0.0), (1.0, 1.0))
    sprite.resize((64, 32))
    assert sprite.global_bounds() == pygame.Rect(0, 0, 64, 32)
    assert sprite.handle_event(_click((1, 1))) is False


def test_label_keeps_size_and_moves_with_window(font):
    label = Label(font, "TESTING LABEL")
    label.set_relative_position((0.5, 0.5))
    label.resize((200, 100))
    first = label.global_bounds()
    label.resize((400, 300))
    second = label.global_bounds()
    assert first.size == second.size
    assert (second.x * 2, second.y * 2) == (400, 300)


def test_manager_gives_event_to_topmost_first(font):
    hits = []
    manager = UIManager()
    manager.add(_full_button(font, lambda: hits.append("bottom")))
    manager.add(_full_button(font, lambda: hits.append("top")))
    assert manager.handle_event(_click((5, 5))) is True
    assert hits == ["top"]


def test_manager_falls_through_hidden_widget(font):
    hits = []
    manager = UIManager()
    manager.add(_full_button(font, lambda: hits.append("bottom")))
    top = manager.add(_full_button(font, lambda: hits.append("top")))
    top.visible = False
    assert manager.handle_event(_click((5, 5))) is True
    assert hits == ["bottom"]


def test_manager_add_returns_widget_and_clear_empties(font):
    manager = UIManager()
    button = Button(font, "Play", None)
    assert manager.add(button) is button
    assert len(manager) == 1
    manager.clear()
    assert len(manager) == 0
    assert manager.handle_event(_click((0, 0))) is False


class _Recorder(UIElement):
    def __init__(self):
        super().__init__()
        self.seen_dt = []
        self.sizes = []

    def update(self, dt):
        self.seen_dt.append(dt)

    def resize(self, size):
        self.sizes.append(size)

    def draw(self, surface):
        pass

    def _local_bounds(self):
        return pygame.Rect(0, 0, 0, 0)


def test_manager_update_and_resize_reach_every_widget():
    manager = UIManager()
    widgets = [manager.add(_Recorder()), manager.add(_Recorder())]
    manager.update(0.25)
    manager.resize_all((320, 200))
    assert [w.seen_dt for w in widgets] == [[0.25], [0.25]]
    assert [w.sizes for w in widgets] == [[(320, 200)], [(320, 200)]]


def test_manager_draws_in_insertion_order(font):
    surface = pygame.Surface((50, 50))
    surface.fill((255, 255, 255))
    manager = UIManager()
    manager.add(_full_button(font, None, size=(50, 50)))
    background = pygame.Surface((10, 10))
    background.fill((255, 0, 0))
    sprite = manager.add(SpriteElement(background))
    sprite.set_relative_bounds((0.0, 0.0), (1.0, 1.0))
    sprite.resize((50, 50))
    manager.draw(surface)
    assert surface.get_at((4, 4))[:3] == (255, 0, 0)