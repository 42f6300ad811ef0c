import pygame

from cubecaster.app import main, translate_key
from cubecaster.config import Key


def test_translate_known_keys():
    assert translate_key(pygame.K_ESCAPE) == Key.ESC
    assert translate_key(pygame.K_w) == Key.W
    assert translate_key(pygame.K_e) == Key.E
    assert translate_key(pygame.K_LEFT) == Key.LEFT
    assert translate_key(pygame.K_RIGHT) == Key.RIGHT


def test_translate_unknown_key():
    assert translate_key(pygame.K_F1) is None


def test_main_needs_exactly_one_argument(capsys):
    assert main([]) == 1
    assert "Usage" in capsys.readouterr().err
    assert main(["a.cub", "b.cub"]) == 1


def test_main_rejects_extension(capsys):
    assert main(["map.txt"]) == 1
    assert "Invalid file extension" in capsys.readouterr().out


def test_main_reports_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.cub")]) == 1
    assert "Invalid file" in capsys.readouterr().out


def test_main_reports_bad_scene(tmp_path, capsys):
    path = tmp_path / "bad.cub"
    path.write_text("F 1,2,3\nC 4,5,6\n\n111\n1N1\n1N1\n111\n")
    assert main([str(path)]) == 1
    assert "Multiple players in map" in capsys.readouterr().out


def test_main_reports_missing_textures(tmp_path, capsys):
    path = tmp_path / "plain.cub"
    path.write_text("F 1,2,3\nC 4,5,6\n\n111\n1N1\n111\n")
    assert main([str(path)]) == 1
    assert "Texture paths can't be null" in capsys.readouterr().out