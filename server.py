import logging
import os
import typing
import json
from flask import Flask, request
from datetime import datetime


def make_request_logger(log_dir):
    """
    Returns a before_request hook that appends each request body as one JSON
    line to <log_dir>/<game file>.jsonl, one file per game id.
    """
    game_files = {}

    def log_request():
        data = request.get_json(silent=True)
        if not data:
            return  # nothing to log
        game_id = data.get("game", {}).get("id")
        game_key = game_id if game_id is not None else "default"
        os.makedirs(log_dir, exist_ok=True)
        if game_key not in game_files:
            # e.g. "26april18_05"
            game_files[game_key] = datetime.now().strftime("%d%B%H_%M").lower()
        log_file = os.path.join(log_dir, f"{game_files[game_key]}.jsonl")
        with open(log_file, "a") as f:
            f.write(json.dumps(data) + "\n")

    log_request.game_files = game_files
    return log_request


def create_app(handlers: typing.Dict, log_dir=None) -> Flask:
    app = Flask("Battlesnake")
    request_logger = None

    if log_dir:
        request_logger = make_request_logger(log_dir)
        app.before_request(request_logger)

    @app.get("/")
    def on_info():
        return handlers["info"]()

    @app.post("/start")
    def on_start():
        game_state = request.get_json()
        handlers["start"](game_state)
        return "ok"

    @app.post("/move")
    def on_move():
        game_state = request.get_json()
        return handlers["move"](game_state)

    @app.post("/end")
    def on_end():
        game_state = request.get_json()
        handlers["end"](game_state)
        if request_logger is not None:
            game_id = game_state.get("game", {}).get("id")
            game_key = game_id if game_id is not None else "default"
            game_filename = request_logger.game_files.get(game_key, "unknown")
            print(f"Game saved to {game_filename}.jsonl")
        return "ok"

    @app.after_request
    def identify_server(response):
        response.headers.set(
            "server", "battlesnake/github/snake-engine-python"
        )
        return response

    return app


def run_server(handlers: typing.Dict, host="0.0.0.0", port=8080, log_dir=None):
    app = create_app(handlers, log_dir=log_dir)

    logging.getLogger("werkzeug").setLevel(logging.ERROR)

    print(f"\nRunning Battlesnake at http://{host}:{port}")

    app.run(host=host, port=port)
