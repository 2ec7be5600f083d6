from __future__ import annotations

import main
from core.settings import Settings
from domain.records.models import RecordType


def test_build_core_loads_default_processors() -> None:
    store, registry = main.build_core()
    assert store.count == 0
    assert registry.active_count == 4
    store.save("Kurama brain initialized", "init", RecordType.EVOLUTION, 10)
    assert store.recall_by_type(RecordType.EVOLUTION).tag == "init"
    main.shutdown_core(store, registry)
    assert store.count == 0
    assert registry.count == 0


def test_app_renders_panels(capsys, monkeypatch) -> None:
    monkeypatch.setattr(main, "setup_logging", lambda level, **kwargs: None)
    assert main.app() == 0
    out = capsys.readouterr().out
    assert "MEMORY STATISTICS" in out
    assert "PersonalityCore" in out


def test_app_uses_json_logs_in_prod(capsys, monkeypatch) -> None:
    calls = []
    monkeypatch.setattr(main, "settings", Settings(ENV="prod", _env_file=None))
    monkeypatch.setattr(main, "setup_logging", lambda level, **kwargs: calls.append(kwargs))
    assert main.app() == 0
    assert calls == [{"json_mode": True}]
