import json

import pytest
import launch
from server import create_app

HANDLERS = {"info": launch.info, "start": launch.start, "move": launch.move, "end": launch.end}


def point(x, y):
    return {"x": x, "y": y}


def game_state(turn=0):
    you = {
        "id": "you-id",
        "name": "engine",
        "health": 100,
        "body": [point(5, 5), point(5, 4), point(5, 3)],
        "length": 3,
    }
    other = {
        "id": "other-id",
        "name": "rival",
        "health": 100,
        "body": [point(9, 9), point(9, 8), point(9, 7)],
        "length": 3,
    }
    return {
        "game": {"id": "game-1"},
        "turn": turn,
        "board": {
            "width": 11,
            "height": 11,
            "food": [point(5, 7)],
            "hazards": [],
            "snakes": [you, other],
        },
        "you": you,
    }


@pytest.fixture
def client():
    return create_app(HANDLERS).test_client()


def test_info(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.get_json()["apiversion"] == "1"
    assert response.headers["server"] == "battlesnake/github/snake-engine-python"


def test_move(client):
    response = client.post("/move", json=game_state())
    body = response.get_json()
    assert body["move"] in launch.DIRECTIONS
    assert body["shout"]


def test_move_never_fails_on_bad_payload(client):
    response = client.post("/move", json={"you": {}})
    assert response.status_code == 200
    assert response.get_json()["move"] in launch.DIRECTIONS


def test_start_and_end(client, capsys):
    assert client.post("/start", json=game_state()).data == b"ok"
    assert client.post("/end", json=game_state(turn=12)).data == b"ok"
    out = capsys.readouterr().out
    assert "[Start]" in out
    assert "[End  ] You won" in out


def test_requests_are_logged_per_game(tmp_path):
    client = create_app(HANDLERS, log_dir=str(tmp_path)).test_client()
    client.post("/start", json=game_state())
    client.post("/move", json=game_state(turn=1))
    client.post("/end", json=game_state(turn=2))

    files = list(tmp_path.glob("*.jsonl"))
    assert len(files) == 1
    lines = files[0].read_text().splitlines()
    assert [json.loads(line)["turn"] for line in lines] == [0, 1, 2]


def test_parse_args():
    args = launch.parse_args(["--port", "9000", "--debug", "--no-lookahead"])
    assert args.port == 9000
    assert args.debug and args.no_lookahead
    assert args.log_dir is None


if __name__ == "__main__":
    pytest.main([__file__])
