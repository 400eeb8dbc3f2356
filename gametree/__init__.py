"""
gametree

A game-agnostic adversarial search engine for two-player, zero-sum,
perfect-information games: minimax with alpha-beta pruning and a
transposition table.

## Architecture

The engine is organized into several key modules:

1. **game**: The contract between engine and games
   - Abstract ZeroSumGame interface (legal moves, make/take back, evaluate, hash)

2. **search**: Search algorithms
   - Fail-soft alpha-beta with transposition table
   - Minimax and negamax reference algorithms
   - Hash move ordering, principal variation extraction

3. **games**: Reference games
   - TicTacToe (exhaustively searchable)
   - ChessGame (python-chess adapter)

4. **utils**: Benchmarking utilities
   - Tic-tac-toe positions with known best moves

## Quick Start

```python
from gametree.games import TicTacToe
from gametree.search import calc_best_move

board = TicTacToe.from_rows("XX.", "XO.", "O.O", x_to_move=True)
best_move, score, nodes, pv, entry = calc_best_move(board, depth=3)
print(f"Best move: {best_move} (score: {score}, nodes: {nodes})")
```

Any game can be searched by subclassing `gametree.game.ZeroSumGame`.

## Version

0.1.0
"""

__version__ = "0.1.0"
__license__ = "MIT"

from gametree.game import ZeroSumGame
from gametree.search import SearchConfig, SearchResult, calc_best_move

__all__ = [
    'ZeroSumGame',
    'SearchConfig',
    'SearchResult',
    'calc_best_move',
]
