import pytest

from fuadmita.app import build_parser


def test_assets_option_is_parsed():
    args = build_parser().parse_args(["--assets", "some/dir"])
    assert args.assets == "some/dir"


def test_assets_defaults_to_none():
    args = build_parser().parse_args([])
    assert args.assets is None


def test_unknown_option_is_rejected():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["--nope"])