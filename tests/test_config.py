from hello_web.config import Config, resolve_templates_dir


def test_defaults():
    assert Config.PORT == 3000
    assert Config.TEMPLATES_DIR == 'templates'


def test_relative_dir_resolves_against_working_directory(monkeypatch, tmp_path):
    (tmp_path / 'templates').mkdir()
    monkeypatch.chdir(tmp_path)
    assert resolve_templates_dir('templates') == tmp_path / 'templates'


def test_missing_default_dir_is_not_replaced(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    assert resolve_templates_dir('templates') == tmp_path / 'templates'


def test_absolute_dir_kept(tmp_path):
    assert resolve_templates_dir(str(tmp_path)) == tmp_path
