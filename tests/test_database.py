from mercury.infrastructure.database import MongoClientFactory, MongoSettings


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("MONGO_URI", "mongodb://db.local:27017/")
    monkeypatch.setenv("MONGO_DATABASE", "audiencias")
    monkeypatch.delenv("MONGO_COLLECTION", raising=False)

    settings = MongoSettings.from_env()

    assert settings == MongoSettings("mongodb://db.local:27017/", "audiencias", "hearings")


def test_factory_reuses_client_and_resolves_collection():
    factory = MongoClientFactory(MongoSettings("mongodb://localhost:27017/", "mercury_test"))

    collection = factory.get_collection()

    assert factory.create_client() is factory.create_client()
    assert collection.name == "hearings"
    assert collection.database.name == "mercury_test"
    factory.close()
