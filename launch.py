import os
import typing
import argparse
import traceback
import numpy as np
from snake_engine import decide_move, snapshot_from_game_state

DEBUG = False      # --debug: print the engine's per-stage diagnostics
LOOKAHEAD = True   # --no-lookahead: skip multi-turn prediction in the space fallback
DIRECTIONS = ["up", "down", "left", "right"]


def debug_print(message):
    if DEBUG:
        print(message)

# API Functions

def info() -> typing.Dict:
    """
    Return snake customization options
    """
    return {
        "apiversion": "1",
        "author": "SnakeEngine",
        "color": "#00FF00",  # green
        "head": "smart",
        "tail": "bolt",
    }

def start(game_state: typing.Dict):
    """Called when game starts"""
    board = game_state['board']
    opponents = [
        s.get('name', s['id'])
        for s in board['snakes']
        if s['id'] != game_state['you']['id']
    ]
    print(
        f"[Start] "
        f"Game={game_state.get('game', {}).get('id', '?'):<36} | "
        f"Opp={(','.join(opponents) or 'None'):<20} | "
        f"Size={board['height']:>2}x{board['width']:<2}"
    )

def end(game_state: typing.Dict):
    """Called when game ends"""
    alive = {s['id'] for s in game_state['board']['snakes']}
    you = game_state['you']['id']
    result = "won" if you in alive else "lost"
    print(f"[End  ] You {result:<4} | Turn={game_state.get('turn', '?')}")
    print("-" * 60)

def move(game_state: typing.Dict) -> typing.Dict:
    """
    Choose a move for the snake with the decision engine
    """
    try:
        board, you = snapshot_from_game_state(game_state)
        decision = decide_move(board, you, observer=debug_print, lookahead=LOOKAHEAD)
    except Exception as e:
        print(f"[ERROR] {e}")
        if DEBUG:
            traceback.print_exc()
        # Fallback: random move
        return {"move": str(np.random.choice(DIRECTIONS))}

    print(
        f"[Move ] "
        f"Turn={game_state.get('turn', '?'):<4} | "
        f"Health={you.health:<3} | "
        f"Length={you.length:<3} | "
        f"Chosen={decision.move:<5} | "
        f"{decision.shout}"
    )
    return {"move": decision.move, "shout": decision.shout}


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Run the Battlesnake decision engine server")
    parser.add_argument("--host", type=str, default="0.0.0.0", help="Interface to bind")
    parser.add_argument("--port", type=int, default=int(os.environ.get("PORT", 8080)),
                        help="Port to listen on (default: $PORT or 8080)")
    parser.add_argument("--debug", action="store_true", help="Print per-stage decision diagnostics")
    parser.add_argument("--no-lookahead", action="store_true",
                        help="Disable multi-turn prediction when maximizing space")
    parser.add_argument("--log-dir", type=str, default=None,
                        help="Append every request to <log-dir>/<game>.jsonl")
    return parser.parse_args(argv)


if __name__ == "__main__":
    from server import run_server
    args = parse_args()
    DEBUG = args.debug
    LOOKAHEAD = not args.no_lookahead
    run_server(
        {"info": info, "start": start, "move": move, "end": end},
        host=args.host,
        port=args.port,
        log_dir=args.log_dir,
    )
