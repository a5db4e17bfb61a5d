import pytest

from wasmpack.mode import InstallMode


@pytest.mark.parametrize(
    "text,mode",
    [
        ("no-install", InstallMode.NOINSTALL),
        ("normal", InstallMode.NORMAL),
        ("force", InstallMode.FORCE),
    ],
)
def test_parse(text, mode):
    assert InstallMode.parse(text) is mode


def test_parse_unknown_raises():
    with pytest.raises(ValueError, match="Unknown build mode: quick"):
        InstallMode.parse("quick")


@pytest.mark.parametrize(
    "mode,permitted",
    [
        (InstallMode.NORMAL, True),
        (InstallMode.FORCE, True),
        (InstallMode.NOINSTALL, False),
    ],
)
def test_install_permitted(mode, permitted):
    assert mode.install_permitted() is permitted


def test_str_round_trips():
    for mode in InstallMode:
        assert InstallMode.parse(str(mode)) is mode