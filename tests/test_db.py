from subway_api.app.core.db import Database, resolve_database_path


def test_migrations_are_idempotent(db):
    db.init()
    with db.connect() as conn:
        versions = [row["version"] for row in conn.execute("SELECT version FROM migrations")]
    assert versions == [1]


def test_relative_path_resolves_to_absolute():
    assert resolve_database_path("subway.db").endswith("subway.db")
    assert Database("/tmp/x.db").path == "/tmp/x.db"
