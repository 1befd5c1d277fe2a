import base64

import pytest

from geopattern import Generator, InvalidConfiguration, Options, Pattern, generate, sha1
from geopattern.color import hex_to_rgb, hsl_to_rgb, rgb_to_hex, rgb_to_hsl

from .conftest import parse, shapes

ZERO_DIGEST = "0" * 40


def background(pattern):
    return shapes(parse(pattern.to_svg()), "rect")[0]


def test_sha1_digest():
    assert sha1("") == "da39a3ee5e6b4b0d3255bfef95601890afd80709"
    assert len(sha1("octocat")) == 40


def test_deterministic():
    a = Pattern("octocat", {"base_color": "#336699", "scale_pattern": 2})
    b = Pattern("octocat", {"base_color": "#336699", "scale_pattern": 2})
    assert a.to_svg() == b.to_svg()


def test_different_strings_differ():
    assert Pattern("octocat").to_svg() != Pattern("hubot").to_svg()


def test_hash_override_matches_string():
    direct = Pattern("octocat")
    override = Pattern("ignored", {"hash": sha1("octocat")})
    assert override.hash == direct.hash
    assert override.to_svg() == direct.to_svg()


def test_invalid_generator():
    with pytest.raises(InvalidConfiguration, match="not-a-real-pattern"):
        Pattern("octocat", {"generator": "not-a-real-pattern"})


@pytest.mark.parametrize("generator", [g.value for g in Generator])
def test_every_name_is_accepted(generator):
    assert Pattern("octocat", {"generator": generator}).generator.value == generator


def test_generator_enum_accepted():
    assert Pattern("octocat", Options(generator=Generator.PLAID)).generator is Generator.PLAID


def test_selection_reads_index_20():
    digest = "0" * 20 + "f" + "0" * 19
    assert Pattern("", {"hash": digest}).generator is Generator.CHEVRONS
    assert Pattern("", {"hash": ZERO_DIGEST}).generator is Generator.OCTOGONS


def test_zero_digest_keeps_base_color():
    pattern = Pattern("", {"hash": ZERO_DIGEST})
    expected = rgb_to_hex(hsl_to_rgb(rgb_to_hsl(hex_to_rgb("#933c3c"))))
    assert pattern.color == expected == "#933c3c"
    assert background(pattern).get("fill") == "rgb(147,60,60)"
    assert background(pattern).get("width") == "100%"


def test_hue_rotation_changes_color():
    # hue offset digits 14..16 are non-zero
    digest = "0" * 14 + "800" + "0" * 23
    assert Pattern("", {"hash": digest}).color != "#933c3c"


@pytest.mark.parametrize("base_color", ["#933c3c", "#336699", "#00ff00", "#fff", "#123"])
@pytest.mark.parametrize("string", ["octocat", "hubot", ""])
def test_grayscale_channels_equal(base_color, string):
    pattern = Pattern(string, {"base_color": base_color, "grayscale": True})
    r, g, b = hex_to_rgb(pattern.color)
    assert r == g == b
    assert background(pattern).get("fill") == f"rgb({r},{r},{r})"


def test_grayscale_ignores_digest():
    a = Pattern("octocat", {"grayscale": True})
    b = Pattern("hubot", {"grayscale": True})
    assert a.color == b.color


def test_encodings():
    pattern = Pattern("octocat")
    assert base64.b64decode(pattern.to_base64()).decode("utf-8") == pattern.to_svg()
    assert pattern.to_data_uri().startswith("data:image/svg+xml;base64,")
    assert pattern.to_css_url() == 'url("' + pattern.to_data_uri() + '")'
    assert pattern.to_data_url() == pattern.to_css_url()
    assert str(pattern) == pattern.to_svg()


def test_malformed_hash_rejected():
    with pytest.raises(InvalidConfiguration):
        Pattern("", {"hash": "xyz" * 20})
    with pytest.raises(InvalidConfiguration):
        Pattern("", {"hash": "abc123"})


def test_bad_base_color_rejected():
    with pytest.raises(InvalidConfiguration):
        Pattern("octocat", {"base_color": "not a color"})


def test_options_mapping_aliases():
    opts = Options.from_mapping({"baseColor": "#ffffff", "scalePattern": 3, "sizeMultiplier": 4})
    assert opts == Options(base_color="#ffffff", scale_pattern=3, size_multiplier=4)
    with pytest.raises(InvalidConfiguration):
        Options.from_mapping({"colour": "#fff"})


def test_options_replace():
    opts = Options().replace(scalePattern=2, grayscale=True)
    assert opts.scale_pattern == 2
    assert opts.grayscale
    assert Options().scale_pattern == 0


def test_generate_convenience():
    a = generate("octocat", generator="squares", base_color="#336699")
    b = Pattern("octocat", Options(generator="squares", base_color="#336699"))
    assert a.to_svg() == b.to_svg()
    c = generate("octocat", Options(base_color="#336699"), generator="squares")
    assert c.to_svg() == a.to_svg()


def test_digest_length_boundary():
    with pytest.raises(InvalidConfiguration):
        Pattern("", {"hash": "0" * 39})
    assert Pattern("", {"hash": "0" * 40}).hash == "0" * 40


@pytest.mark.parametrize("options", [
    {"base_color": 123},
    {"scale_pattern": "2"},
    {"scale_pattern": 1.5},
    {"size_multiplier": "3"},
])
def test_mistyped_options_rejected(options):
    with pytest.raises(InvalidConfiguration):
        Pattern("octocat", options)
