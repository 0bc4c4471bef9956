from terradocs.version import core, full, short


def test_core():
    assert core() == "0.16.0"


def test_short_adds_prerelease():
    assert short() == core() + "-alpha"


def test_full_without_commit():
    version, platform_part = full().split(" ")
    assert version == f"v{short()}"
    os_name, arch = platform_part.split("/")
    assert os_name and arch


def test_full_with_commit():
    result = full("abc1234")
    assert result.startswith(f"v{short()} abc1234 ")
    assert len(result.split(" ")) == 3


def test_full_does_not_double_space():
    assert full(" abc1234") == full("abc1234")


def test_full_platform_is_stable():
    assert full("x").split(" ")[-1] == full().split(" ")[-1]