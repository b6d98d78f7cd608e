from planar.demo import (
    LayoutSettings,
    load_settings,
    main,
    render
)


def test_render_defaults():
    styles = render(LayoutSettings())
    assert styles["center"] == {"left": "-100px", "top": "-100px", "width": "200px", "height": "200px"}
    assert styles["aligned"] == {"left": "116px", "top": "-75px", "width": "150px", "height": "150px"}
    assert styles["hovered"] == {"left": "108px", "top": "-83px", "width": "166px", "height": "166px"}


def test_render_keep_aligned_on_hover():
    styles = render(LayoutSettings(keep_aligned_on_hover=True))
    assert styles["hovered"]["left"] == "116px"
    assert styles["hovered"]["top"] == "-83px"


def test_load_settings():
    assert load_settings(None) == LayoutSettings()
    settings = load_settings('{"padding": 24, "other_size": [100, 50]}')
    assert settings.padding == 24
    assert settings.other_size == (100, 50)
    assert settings.center_size == (200, 200)


def test_main(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "aligned: {'left': '116px'" in out

    assert main(['{"padding": "wide"}']) == 1
    assert "Bad settings" in capsys.readouterr().out

    assert main(["{not json"]) == 1
