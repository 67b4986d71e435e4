from workforce_metrics.main import create_app


def test_create_app_registers_report_routes(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")

    app = create_app()

    rules = {rule.rule for rule in app.url_map.iter_rules()}
    assert {
        "/reports/attendance",
        "/reports/attendance.csv",
        "/reports/performance",
        "/reports/performance/<section>.csv",
        "/projects/<project_id>/health",
    } <= rules
    assert app.config["TESTING"] is True


def test_settings_module_follows_app_env(monkeypatch):
    from config import get_settings_module

    monkeypatch.setenv("APP_ENV", "prod")
    assert get_settings_module() == "config.production"
    monkeypatch.delenv("APP_ENV")
    assert get_settings_module() == "config.development"
