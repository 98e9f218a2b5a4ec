# cobra

A classic snake game on a square grid, drawn with pygame. You can change
the grid cell size while you play. The amount of food on the board
follows the cell size.

## Installing

```
pip install .
```

## Playing

```
cobra
```

This opens a window titled "Cobra". By default the window is 800×600 pixels.
You can choose another size:

```
cobra --width 1000 --height 500
```

| Key | Action |
| --- | --- |
| Arrow keys or W A S D | Steer the snake. It cannot turn straight back on itself. |
| Keypad 1 | Switch to the next grid cell size |
| Keypad 2 | Switch to the previous grid cell size |
| Escape, or closing the window | Quit |

### Movement

- The snake starts with 7 segments and heads upward.
- It moves one cell every 0.17 seconds.
- When its head goes off one edge of the board, it comes back in on the opposite edge.

### Food

- Each piece of food the snake eats adds one segment to the snake and one point to its score.
- Eaten food comes back at once on a cell that neither the snake nor other food covers.
- The number of pieces on the board is a third of the cell size in pixels, rounded. A 25-pixel grid holds 8 pieces.

### Grid cell size

- You can only pick a cell size that divides both the window width and the window height, from 10 to 50 pixels.
- The grid starts at 25 pixels.
- While the snake's body is split across an edge of the board, the grid keeps its current size.

## What it does not do

The game has no game-over condition. The snake can run into itself without
consequence. The score is kept on the `Snake` object (`score`), but it is
not shown on screen. High scores are not tracked or saved.

## Using it from code

The game logic does not need a window, so you can drive it directly:

```python
import random

from cobra.game import Game
from cobra.controls import Key

game = Game(800, 600, random.Random(1))
game.handle_input(Key.RIGHT)
game.update(0.2)
print(game.snake.head, game.snake.score)
```

The package has these modules:

- `cobra.game`: `Game`, which ties the board, the snake and the food together, and `main`, the function the `cobra` command calls.
- `cobra.grid`: `Grid`, the board. It has the available cell sizes, `columns` and `rows`.
- `cobra.snake`: `Snake` and `Direction`.
- `cobra.food_handler`: `FoodHandler`, which places, feeds and restocks the food.
- `cobra.entities`: `Food` and `SnakeSegment`.
- `cobra.controls`: `Key` and `key_from_pygame`.
- `cobra.utils`: `get_factors`, `get_common_factors` and `snap_to_grid`.

## Running the tests

```
pip install .[test]
pytest
```