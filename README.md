# towerdefense

A small tower defense game built on pygame. Enemies walk along the middle row of
an 800×600 board. You spend gold to build towers that shoot them. Each enemy that
reaches the far side costs you one life.

## Installing

```
pip install .
```

This also installs pygame.

## Playing

Start the graphical game:

```
tower-defense
```

`--max-frames N` stops the game after N frames.

Controls:

- **Enter** on the title screen opens the main menu. The menu has four buttons:
  JOUER (play), PARAMETRES (settings), SCORES and QUITTER (quit).
- **Space** starts the next wave. Enemies appear two seconds apart.
- **Left click** below the HUD builds a tower in the cell you clicked. A tower
  costs 50 gold. It hits the first living enemy within 100 pixels for 25 damage
  on every frame.
- **Escape**, or the blue button at the top right, opens the pause menu. The green
  button opens the tower menu.
- The settings screen raises or lowers the volume in steps of 10, between 0 and 100.

You start with 100 gold and 10 lives. A kill earns 10 gold and 100 points. Clearing
a wave earns 20 gold. The first wave has 5 enemies, and each wave after it has two
more. When your lives reach zero, the defeat sound plays and you go back to the
main menu.

Assets are read from `assets/` under the current directory:

- The font is `assets/arial.TTF`. If it is missing, pygame's default font is used.
- The sounds are `ambiance.wav`, `click.wav`, `victory.wav` and `defeat.wav`.
  If any of them is missing, an error line is printed and that sound stays silent.

### Console simulation

```
tower-defense-console [--seed N]
```

This plays five waves in text. It prints the enemies destroyed in each wave and the
result, then the final score and the lives left. From wave 3 onwards, each wave
has a one-in-three chance of costing a life. `--seed` makes the run repeatable.

## Using it as a library

None of the game logic needs a window.

- `towerdefense.enemy.Enemy` follows grid waypoints. It has `move_towards`,
  `take_damage`, `is_alive` and `has_reached_end`.
- `towerdefense.tower` contains `Tower`, `BasicTower` and `SniperTower`, and
  `create_tower(TowerType.BASIC)`. A basic or sniper tower attacks the first
  living enemy in range. `upgrade`, `sell` and `accelerate` change a tower's
  level, price and attack speed.
- `towerdefense.board.Board` holds one tower per grid cell. It has `place_tower`
  and `simulate_turn`.
- `towerdefense.tilemap.TileMap` is a tile grid with a straight path from a start
  base to an end base. It exposes `waypoints` in pixels and `tile_at`.
- `towerdefense.session.Session` tracks gold, lives, score, wave, volume and the
  game's sounds.
- `towerdefense.resources.ResourceManager` loads and caches fonts, textures and
  sounds. If a file cannot be loaded, it raises `ResourceError`.
- `towerdefense.console.run_console_game(rng, out)` runs the text simulation and
  returns a `ConsoleResult` with `score`, `lives`, `waves` and `victory`.
- `towerdefense.app.App` runs the screens from `towerdefense.states`. You can pass
  it your own surface and event source, and `run(max_frames)` limits how many
  frames it runs.

## What it does not do

- Building by click always places the same kind of tower. The tower menu only
  checks that you have enough gold, then returns to the battle. It does not
  select a sniper or basic tower.
- Leaving the battle for the pause or tower menu and coming back starts a new
  board with no towers or enemies. Gold, lives, score and wave are kept.
- The SCORES button only prints a line. Scores are neither displayed nor saved.
- After a defeat, lives are not reset. To play a fresh game, restart the program.
- There is no victory screen.

## Running the tests

```
pip install .[test]
pytest
```