import pytest

from main import parse_args
from settings import FPS


def test_defaults():
    args = parse_args([])
    assert args.width is None and args.height is None
    assert args.fps == FPS
    assert args.seed is None
    assert not args.mute
    assert args.log_level == "WARNING"


def test_explicit_size_and_seed():
    args = parse_args(["--width", "1024", "--height", "768", "--seed", "3", "--mute"])
    assert (args.width, args.height, args.seed, args.mute) == (1024, 768, 3, True)


@pytest.mark.parametrize("argv", [
    ["--width", "0", "--height", "600"],
    ["--fps", "-1"],
    ["--width", "800"],
    ["--log-level", "LOUD"],
])
def test_invalid_arguments_rejected(argv):
    with pytest.raises(SystemExit):
        parse_args(argv)
