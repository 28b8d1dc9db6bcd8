import pytest

import main


@pytest.fixture
def no_side_effects(monkeypatch):
    monkeypatch.setattr(
        main,
        "load_config",
        lambda: {
            "SHRINK_WIDTH": 24,
            "ROW_SPACING": 1,
            "COL_SPACING": 1,
            "KEY_BINDINGS": {},
            "LOG_LEVEL": "WARNING",
        },
    )
    monkeypatch.setattr(main, "setup_logging", lambda *a, **k: None)
    monkeypatch.setattr(main, "set_log_level", lambda level: None)
    calls = []
    monkeypatch.setattr(main.curses, "wrapper", lambda fn: calls.append(fn))
    return calls


def test_version_flag(capsys):
    assert main.main(["-v"]) == 0
    assert capsys.readouterr().out.strip() == main.__version__


def test_missing_source_is_fatal(no_side_effects, capsys):
    assert main.main([]) == 1
    assert "Load failed: no data source given" in capsys.readouterr().err
    assert no_side_effects == []


def test_unreadable_file_is_fatal(no_side_effects, tmp_path, capsys):
    assert main.main([str(tmp_path / "nope.csv")]) == 1
    assert "Load failed" in capsys.readouterr().err
    assert no_side_effects == []


def test_path_and_demo_together_is_fatal(no_side_effects, tmp_path, capsys):
    path = tmp_path / "t.csv"
    path.write_text("a\n1\n")
    assert main.main([str(path), "--demo"]) == 1
    assert no_side_effects == []


def test_demo_starts_the_ui(no_side_effects):
    assert main.main(["--demo"]) == 0
    assert len(no_side_effects) == 1


@pytest.mark.parametrize(
    "argv, header",
    [
        (["t.csv"], True),
        (["--no-header", "t.csv"], False),
    ],
)
def test_header_flag(argv, header, monkeypatch):
    seen = {}

    def fake_load(path, header=True):
        seen["args"] = (path, header)
        return "source"

    monkeypatch.setattr(main, "load_data_source", fake_load)
    args = main.build_parser().parse_args(argv)
    assert main.load_source(args) == "source"
    assert seen["args"] == ("t.csv", header)


def test_logging_is_ready_before_config_is_read(monkeypatch):
    order = []

    def fake_config():
        order.append("config")
        return {
            "SHRINK_WIDTH": 24,
            "ROW_SPACING": 1,
            "COL_SPACING": 1,
            "KEY_BINDINGS": {},
            "LOG_LEVEL": "DEBUG",
        }

    monkeypatch.setattr(main, "load_config", fake_config)
    monkeypatch.setattr(
        main, "setup_logging", lambda level, *a, **k: order.append(("setup", level))
    )
    monkeypatch.setattr(main, "set_log_level", lambda level: order.append(("level", level)))
    monkeypatch.setattr(main.curses, "wrapper", lambda fn: None)

    assert main.main(["--demo"]) == 0
    assert order == [("setup", "WARNING"), "config", ("level", "DEBUG")]
