from settings import Settings, read_env_file, truthy


def test_defaults(tmp_path):
    s = Settings.load(environ={}, env_file=tmp_path / "missing.env")
    assert s == Settings(estimate=20, sorted_output=True, log_dir=None, log_level="WARNING")


def test_environment_values(tmp_path):
    s = Settings.load(environ={
        "COURSEDB_ESTIMATE": "100",
        "COURSEDB_SORTED": "off",
        "COURSEDB_LOG_DIR": str(tmp_path / "logs"),
        "COURSEDB_LOG_LEVEL": "info",
        "UNRELATED": "x",
    }, env_file=tmp_path / "missing.env")
    assert s.estimate == 100
    assert s.sorted_output is False
    assert s.log_dir == str(tmp_path / "logs")
    assert s.log_level == "info"


def test_bad_estimate_keeps_default(tmp_path):
    s = Settings.load(environ={"COURSEDB_ESTIMATE": "lots"}, env_file=tmp_path / "missing.env")
    assert s.estimate == 20


def test_env_file_is_fallback(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text(
        "# local overrides\nCOURSEDB_ESTIMATE=50\nCOURSEDB_SORTED='0'\nnot a pair\nOTHER=1\n",
        encoding="utf-8",
    )
    assert read_env_file(env_file) == {"COURSEDB_ESTIMATE": "50", "COURSEDB_SORTED": "0"}
    s = Settings.load(environ={"COURSEDB_ESTIMATE": "7"}, env_file=env_file)
    assert s.estimate == 7
    assert s.sorted_output is False


def test_truthy():
    assert truthy(None) is True
    assert truthy(None, default=False) is False
    assert truthy("yes") is True
    for value in ("0", "false", "No", " off ", ""):
        assert truthy(value) is False
