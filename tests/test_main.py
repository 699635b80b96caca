import pytest

from burstvis.__main__ import build_parser, main


def test_defaults():
    args = build_parser().parse_args([])
    assert (args.width, args.height, args.fps) == (1280, 720, 60)
    assert args.record is None
    assert not args.mute


@pytest.mark.parametrize(
    "argv",
    [
        ["--record", "show.mp4"],
        ["--record", "show.mp4", "--duration", "0"],
        ["--width", "0"],
        ["--fps", "-5"],
    ],
)
def test_invalid_arguments_are_rejected(argv):
    with pytest.raises(SystemExit) as exc:
        main(argv)
    assert exc.value.code == 2


def test_startup_failure_is_reported_once(monkeypatch):
    def broken(args):
        raise RuntimeError("no display")

    monkeypatch.setattr("burstvis.__main__.run_window", broken)

    with pytest.raises(SystemExit) as exc:
        main([])
    assert exc.value.code == "[!] Error starting fireworks: no display"
