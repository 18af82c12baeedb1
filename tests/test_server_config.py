def test_get_server_kwargs_defaults(monkeypatch):
    # Import lazily so monkeypatch can affect env usage deterministically.
    from icalrrule.api import server

    monkeypatch.delenv("RRULE_API_HOST", raising=False)
    monkeypatch.delenv("RRULE_API_PORT", raising=False)
    monkeypatch.delenv("DEBUG", raising=False)

    kwargs = server.get_server_kwargs()
    assert kwargs == {"host": "0.0.0.0", "port": 8000, "reload": False}


def test_get_server_kwargs_from_env(monkeypatch):
    from icalrrule.api import server

    monkeypatch.setenv("RRULE_API_HOST", "127.0.0.1")
    monkeypatch.setenv("RRULE_API_PORT", "9001")
    monkeypatch.setenv("DEBUG", "True")

    kwargs = server.get_server_kwargs()
    assert kwargs["host"] == "127.0.0.1"
    assert kwargs["port"] == 9001
    assert kwargs["reload"] is True


def test_app_import_path_points_at_app():
    from icalrrule.api import app as app_module
    from icalrrule.api import server

    module_path, attr = server.APP_IMPORT_PATH.split(":")
    assert module_path == app_module.__name__
    assert getattr(app_module, attr) is app_module.app
