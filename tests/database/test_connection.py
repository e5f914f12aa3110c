from training_scheduler.container import build_container


def _settings(database):
    return {"host": "localhost", "port": "3307", "user": "app", "password": "secret", "database": database}


def test_each_container_keeps_its_own_database():
    first = build_container(db_config=_settings("training_scheduler"))
    second = build_container(db_config=_settings("training_scheduler_test"))

    assert first.conn is not second.conn
    assert first.conn.config.database == "training_scheduler"
    assert second.conn.config.database == "training_scheduler_test"
    assert second.conn.config.port == 3307


def test_port_defaults_to_3306():
    settings = _settings("training_scheduler")
    del settings["port"]

    assert build_container(db_config=settings).conn.config.port == 3306
