# galaxus

A small arcade game skeleton built on pygame. It opens a window, shows a
title menu, and switches between a play field and a pause screen through a
stack of game states.

## Installing

```
pip install .
```

## Running

```
galaxus
galaxus --settings path/to/settings.json --resources path/to/resources
```

By default the game reads `settings.json` and loads its fonts, textures and
sounds from a `resources/` directory, both relative to the current working
directory. `--settings` and `--resources` point it elsewhere.

If anything goes wrong (a missing settings file, a bad setting, a missing
resource), the game prints `Error: <message>` to standard error, waits for
Enter and exits with status 1.

### settings.json

The file must exist and hold a JSON object. Every key is optional; a missing
key keeps its default:

```json
{
  "windowWidth": 800,
  "windowHeight": 600,
  "fullscreen": false,
  "vsync": false,
  "frameLimit": 60
}
```

`windowWidth`, `windowHeight` and `frameLimit` must be non-negative integers;
`fullscreen` and `vsync` must be booleans. A `frameLimit` of `0` leaves the
frame rate uncapped. In fullscreen mode the window takes the desktop size.

### Resources

| Kind     | Path                              |
|----------|-----------------------------------|
| Fonts    | `resources/fonts/<name>.ttf`      |
| Textures | `resources/textures/<name>.png`   |
| Sounds   | `resources/audio/<name>.wav`      |

The menu needs `resources/textures/menu_background.png` and
`resources/fonts/arial.ttf`; the pause screen needs the same font. The
window icon is read from `resources/textures/icon.png`.

## Controls

- **Menu**: click *Play* or press Enter to start.
- **Play**: move the red circle with W, A, S and D. Press Escape to pause,
  or Enter to go back to the menu.
- **Pause**: the play field stays visible beneath a "PAUSED" caption. Press
  Escape to resume. B and C turn the caption magenta and green.
- **Anywhere**: F11 switches between windowed and fullscreen.

## Using it as a library

```python
from galaxus.game import Game

Game(settings_path="settings.json", resource_root="resources").run()
```

The building blocks can also be used on their own:

- `galaxus.settings.WindowSettings` is a dataclass of window options.
  `WindowSettings.load_from_file(path)` reads them from JSON and
  `make_window()` opens the pygame display.
- `galaxus.resources.ResourceManager(root)` loads resources by name and keeps
  them cached: `get_font(name, size)`, `get_texture(name)` and
  `get_sound(name)`, with `unload_font`, `unload_texture` and `unload_sound`
  returning whether anything was cached. A file that cannot be loaded raises
  `ResourceError`.
- `galaxus.ui` has the widgets `Button`, `SpriteElement` and `Label`, plus
  `UIManager`, which holds them, draws them in the order they were added and
  offers events to the most recently added first. Widgets are placed as
  fractions of the window size and move into place on `resize`.
- `galaxus.states` has `StateManager`, a stack of states in which only the
  top state gets events and updates while every state is drawn, and the
  states `MenuState`, `PlayState` and `PauseState`.

## What it does not do

This is a skeleton rather than a finished game. The play field holds only a
movable circle: there are no enemies, scoring or saving. Sounds can be loaded
through `ResourceManager.get_sound`, but nothing in the game plays them.

## Tests

```
pip install .[test]
pytest
```