import json

from combo.cli import main
from combo.codec import decode, encode
from combo.scenario import Move, Scenario


def test_randomize_json_is_repeatable(capsys) -> None:
    assert main(["--base-url", "https://example.com/", "randomize", "--seed", "3", "--height", "200"]) == 0
    first = json.loads(capsys.readouterr().out)
    assert main(["--base-url", "https://example.com/", "randomize", "--seed", "3", "--height", "200"]) == 0
    second = json.loads(capsys.readouterr().out)
    assert first == second
    assert first["shareLink"] == f"https://example.com/?combo={first['token']}"
    assert decode(first["token"]).positions.bottom_offset == 100.0


def test_decode_share_link_as_text(capsys) -> None:
    token = encode(Scenario(percentage=12, starting_move=Move.DOWN_TILT))
    assert main(["decode", f"https://example.com/?combo={token}", "--output-format", "text"]) == 0
    out = capsys.readouterr().out
    assert "Starting move: Down Tilt | Percentage: 12%" in out


def test_decode_malformed_token_fails(capsys) -> None:
    assert main(["decode", "not-a-valid-token!!"]) == 1
    assert "error" in capsys.readouterr().out


def test_encode_file(tmp_path, capsys) -> None:
    path = tmp_path / "combo.json"
    path.write_text(json.dumps({"percentage": 40, "startingMove": "Sfair"}), encoding="utf-8")
    assert main(["encode", str(path)]) == 0
    data = json.loads(capsys.readouterr().out)
    scenario = decode(data["token"])
    assert scenario.percentage == 40
    assert scenario.starting_move == Move.SFAIR
