import pytest
from click.testing import CliRunner
from PIL import Image

from cardforge import __version__
from cardforge.cli import _template_names, cli

from conftest import TEST_FONT, make_png


@pytest.fixture
def runner(monkeypatch, font_dir, workspace):
    monkeypatch.setenv("CARDFORGE_ROOT", str(workspace))
    monkeypatch.setenv("CARDFORGE_FONT_DIRS", str(font_dir))
    monkeypatch.setattr("cardforge.fonts.system_font_dirs", lambda: [])
    return CliRunner()


# root, images, templates, template choice, texts, outputs, header font, body font
ACCEPT_DEFAULTS = "\n" * 8


def test_make_with_defaults(runner, workspace):
    result = runner.invoke(cli, ["make"], input=ACCEPT_DEFAULTS)

    assert result.exit_code == 0, result.output
    assert "card_bg.png" in result.output
    assert TEST_FONT in result.output
    assert "Done: 1 card(s)" in result.output
    with Image.open(workspace / "outputs" / "card_hero.png") as im:
        assert im.size == (243, 340)


def test_make_reprompts_for_missing_path(runner, workspace):
    answers = ["", str(workspace / "nowhere"), str(workspace / "images")] + [""] * 6
    result = runner.invoke(cli, ["make"], input="\n".join(answers) + "\n")

    assert result.exit_code == 0, result.output
    assert "Path does not exist" in result.output


def test_make_uses_settings_file(runner, workspace):
    (workspace / "images").rename(workspace / "art")
    (workspace / "cardforge.yml").write_text("images_dir: art\n", encoding="utf-8")

    result = runner.invoke(cli, ["make"], input=ACCEPT_DEFAULTS)

    assert result.exit_code == 0, result.output
    assert (workspace / "outputs" / "card_hero.png").exists()


def test_make_rejects_wrong_illustration_size(runner, workspace):
    make_png(workspace / "images" / "giant.png", (500, 500))

    result = runner.invoke(cli, ["make"], input=ACCEPT_DEFAULTS)

    assert result.exit_code == 1
    assert not (workspace / "outputs" / "card_hero.png").exists()


def test_make_without_templates(runner, workspace):
    (workspace / "templates" / "card_bg.png").unlink()

    result = runner.invoke(cli, ["make"], input=ACCEPT_DEFAULTS)

    assert result.exit_code == 1


def test_make_without_fonts(runner, monkeypatch, tmp_path):
    monkeypatch.setenv("CARDFORGE_FONT_DIRS", str(tmp_path / "empty"))

    result = runner.invoke(cli, ["make"], input=ACCEPT_DEFAULTS)

    assert result.exit_code == 1


def test_make_aborted(runner):
    result = runner.invoke(cli, ["make"], input="")
    assert result.exit_code == 1


def test_validate_command(runner, workspace):
    ok = runner.invoke(cli, ["validate", str(workspace / "images"), "--kind", "illustration"])
    assert ok.exit_code == 0, ok.output
    assert "OK" in ok.output

    bad = runner.invoke(cli, ["validate", str(workspace / "images"), "--kind", "card"])
    assert bad.exit_code == 1


def test_fonts_command(runner):
    result = runner.invoke(cli, ["fonts"])
    assert result.exit_code == 0
    assert result.output.split() == [TEST_FONT]


def test_version(runner):
    result = runner.invoke(cli, ["--version"])
    assert __version__ in result.output


def test_make_fails_when_outputs_do_not_validate(runner, workspace):
    (workspace / "outputs" / "notes.txt").write_text("stray", encoding="utf-8")

    result = runner.invoke(cli, ["make"], input=ACCEPT_DEFAULTS)

    assert result.exit_code == 1
    assert (workspace / "outputs" / "card_hero.png").exists()
    assert "Done" not in result.output


def test_template_menu_needs_lowercase_png_suffix(tmp_path):
    make_png(tmp_path / "extra" / "OTHER.PNG", (243, 340))
    make_png(tmp_path / "extra" / "card_bg.png", (243, 340))
    assert _template_names(tmp_path / "extra") == ["card_bg.png"]
