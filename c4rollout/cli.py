"""CLI rendering, input helpers and game loops for Connect-4."""

from __future__ import annotations

from typing import Dict, List, Optional

import typer
from rich.console import Console
from rich.table import Table
from tqdm import trange

from c4rollout.agents import Agent, HumanAgent, MonteCarloAgent, RandomAgent
from c4rollout.board import COLUMNS, LEVELS, Board, Circle, get_winner, opponent
from c4rollout.evaluator import ColumnStats, EvaluatorConfig, best_column, score_columns

app = typer.Typer(no_args_is_help=True)
console = Console()

GLYPHS = {Circle.EMPTY: ".", Circle.YELLOW: "Y", Circle.RED: "R"}
NAMES = {Circle.YELLOW: "Yellow", Circle.RED: "Red"}

# Interactive budget; EvaluatorConfig keeps the 10,000 reference default.
CLI_GAMES_PER_MOVE = 1_000


def render_board(board: Board) -> str:
    lines: List[str] = []
    for level in range(LEVELS - 1, -1, -1):
        lines.append("".join(f"[{GLYPHS[board.get(col, level)]}]" for col in range(COLUMNS)))
    lines.append("".join(f" {col} " for col in range(COLUMNS)))
    return "\n".join(lines)


def parse_column(raw: str) -> Optional[int]:
    raw = raw.strip()
    if not raw:
        return None
    try:
        col = int(raw)
    except ValueError:
        return None
    if 0 <= col < COLUMNS:
        return col
    return None


def parse_moves(raw: str) -> List[int]:
    """Parse "3,3,4" (or the compact "334") into a list of columns."""
    raw = raw.strip()
    if not raw:
        return []
    parts = raw.split(",") if "," in raw else list(raw)
    moves: List[int] = []
    for part in parts:
        col = parse_column(part)
        if col is None:
            raise ValueError(f"bad column {part.strip()!r}: expected 0-{COLUMNS - 1}")
        moves.append(col)
    return moves


def prompt_for_human_move(board: Board, player: Circle, name: str) -> int:
    legal = board.legal_columns()
    prompt = f"{name} ({GLYPHS[player]}) to move. Column {legal}"

    while True:
        raw = typer.prompt(prompt)
        col = parse_column(raw)
        if col is None:
            console.print(f"Enter a column index 0-{COLUMNS - 1}.")
            continue
        if col not in legal:
            console.print("Illegal move: column full.")
            continue
        return col


def describe_outcome(outcome: Circle) -> str:
    if outcome == Circle.DRAW:
        return "Result: draw"
    return f"Result: {NAMES[outcome]} wins"


def print_column_stats(stats: List[ColumnStats], player: Circle) -> None:
    table = Table(title=f"Rollouts for {NAMES[player]}")
    table.add_column("col", justify="right")
    table.add_column("games", justify="right")
    table.add_column("won", justify="right")
    table.add_column("lost", justify="right")
    table.add_column("draws", justify="right")
    table.add_column("score", justify="right")
    for s in stats:
        if s.immediate_win:
            table.add_row(str(s.col), "-", "-", "-", "-", "wins now")
            continue
        table.add_row(str(s.col), str(s.games), str(s.won), str(s.lost), str(s.draws), f"{s.score:.3f}")
    console.print(table)


def play_game(board: Board, human: Agent, computer: Agent, *, show_stats: bool = False) -> Circle:
    """
    Human (Red) against the computer (Yellow), human first, until the game ends.

    Returns the final outcome.
    """

    while True:
        console.print(render_board(board), markup=False, highlight=False)
        outcome = get_winner(board)
        if outcome != Circle.EMPTY:
            console.print(describe_outcome(outcome))
            return outcome

        col = human.select_move(board, Circle.RED)
        board.drop(col, Circle.RED)
        if get_winner(board) != Circle.EMPTY:
            continue

        col = computer.select_move(board, Circle.YELLOW)
        if show_stats and isinstance(computer, MonteCarloAgent):
            print_column_stats(computer.last_stats, Circle.YELLOW)
        board.drop(col, Circle.YELLOW)
        console.print(f"Computer: {NAMES[Circle.YELLOW]} -> col {col}")
        console.print("")


def play_agents(board: Board, agents: Dict[Circle, Agent], first: Circle) -> Circle:
    """Play two agents against each other without rendering; returns the outcome."""
    player = first
    while True:
        outcome = get_winner(board)
        if outcome != Circle.EMPTY:
            return outcome
        col = agents[player].select_move(board, player)
        if col is None or not board.drop(col, player):
            raise ValueError(f"{agents[player].name} chose an illegal column: {col}")
        player = opponent(player)


def _evaluator_config(games: int, seed: Optional[int]) -> EvaluatorConfig:
    cfg = EvaluatorConfig(games_per_move=games, seed=seed)
    try:
        cfg.validate()
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    return cfg


@app.command()
def play(
    games: int = typer.Option(CLI_GAMES_PER_MOVE, help="Random games simulated per candidate column."),
    seed: Optional[int] = typer.Option(None, help="Random seed for the computer player."),
    show_stats: bool = typer.Option(
        False, "--show-stats", help="Print per-column rollout statistics after each computer move.", is_flag=True
    ),
) -> None:
    """Play as Red against the Monte Carlo player (Yellow). You move first."""
    cfg = _evaluator_config(games, seed)
    board = Board()
    board.clean()
    human = HumanAgent("You", prompt_for_human_move)
    computer = MonteCarloAgent("Computer", cfg)
    play_game(board, human, computer, show_stats=show_stats)


@app.command()
def suggest(
    moves: str = typer.Option("", help="Moves played so far, Red first: '3,3,4' or '334'."),
    player: Optional[str] = typer.Option(None, help="Side to move: yellow|red (default: inferred from moves)."),
    games: int = typer.Option(CLI_GAMES_PER_MOVE, help="Random games simulated per candidate column."),
    seed: Optional[int] = typer.Option(None, help="Random seed."),
) -> None:
    """Score every column of a position and print the suggested move."""
    cfg = _evaluator_config(games, seed)
    try:
        board = Board.from_moves(parse_moves(moves))
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    if player is None:
        side = Circle.RED if board.pieces() % 2 == 0 else Circle.YELLOW
    elif player.lower() in {"yellow", "y"}:
        side = Circle.YELLOW
    elif player.lower() in {"red", "r"}:
        side = Circle.RED
    else:
        raise typer.BadParameter("player must be 'yellow' or 'red'")

    console.print(render_board(board), markup=False, highlight=False)
    outcome = get_winner(board)
    if outcome != Circle.EMPTY:
        console.print(f"game over: {describe_outcome(outcome)}")
        raise typer.Exit(code=2)

    stats = score_columns(board, side, config=cfg)
    print_column_stats(stats, side)
    console.print(f"suggested move for {NAMES[side]}: col {best_column(stats)}")


@app.command()
def match(
    rounds: int = typer.Option(10, help="Number of games to play."),
    games: int = typer.Option(200, help="Random games per candidate column for the Monte Carlo player."),
    seed: int = typer.Option(0, help="Base random seed (both players)."),
) -> None:
    """Monte Carlo player (Yellow) against the random baseline (Red), alternating who starts."""
    if rounds < 1:
        raise typer.BadParameter("rounds must be >= 1")
    cfg = _evaluator_config(games, seed)

    agents: Dict[Circle, Agent] = {
        Circle.YELLOW: MonteCarloAgent("Monte Carlo", cfg),
        Circle.RED: RandomAgent("Random", seed=seed + 1),
    }
    tally = {Circle.YELLOW: 0, Circle.RED: 0, Circle.DRAW: 0}
    for i in trange(rounds, desc="match", leave=False):
        first = Circle.YELLOW if i % 2 == 0 else Circle.RED
        tally[play_agents(Board(), agents, first)] += 1

    table = Table(title=f"{rounds} games, {games} rollouts per column")
    table.add_column("player")
    table.add_column("wins", justify="right")
    for color in (Circle.YELLOW, Circle.RED):
        table.add_row(f"{agents[color].name} ({NAMES[color]})", str(tally[color]))
    table.add_row("draws", str(tally[Circle.DRAW]))
    console.print(table)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
