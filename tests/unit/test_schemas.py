"""Unit tests for Mattermost spec models and schemas."""

import pytest
from marshmallow import ValidationError
from mattermost_operator.types.models import (
    Database,
    ExternalVolumeFileStore,
    FileStore,
    Ingress,
    MattermostSpec,
    OperatorManagedDatabase,
    OperatorManagedMinio,
)
from mattermost_operator.types.schemas import (
    DatabaseSchema,
    FileStoreSchema,
    MattermostSpecSchema,
)
from mattermost_operator.types.settings import (
    DEFAULTS,
    MattermostDefaults,
    Settings,
    load_defaults,
)


class TestMattermostSpecSchema:
    """Tests for loading the Mattermost CR spec."""

    def test_load_full_spec(self):
        data = {
            "image": "mattermost/mattermost-enterprise-edition",
            "version": "5.37.1",
            "replicas": 2,
            "imagePullPolicy": "Always",
            "ingress": {
                "enabled": True,
                "host": "chat.example.com",
                "annotations": {"a": "b"},
                "tlsSecret": "chat-cert",
            },
            "resourceLabels": {"team": "a"},
            "fileStore": {"external": {"url": "s3.amazonaws.com", "bucket": "mm", "secret": "s3"}},
            "database": {"operatorManaged": {"type": "postgres", "version": "13"}},
        }
        spec = MattermostSpecSchema().load(data)
        assert isinstance(spec, MattermostSpec)
        assert spec.replicas == 2
        assert spec.image_pull_policy == "Always"
        assert isinstance(spec.ingress, Ingress)
        assert spec.ingress.tls_secret == "chat-cert"
        assert spec.resource_labels == {"team": "a"}
        assert spec.file_store.external.bucket == "mm"
        assert spec.file_store.is_external() is True
        assert spec.database.operator_managed.type == "postgres"

    def test_load_legacy_fields(self):
        spec = MattermostSpecSchema().load(
            {
                "ingressName": "chat.example.com",
                "ingressAnnotations": {"a": "b"},
                "useIngressTLS": True,
            }
        )
        assert spec.ingress is None
        assert spec.ingress_name == "chat.example.com"
        assert spec.ingress_annotations == {"a": "b"}
        assert spec.use_ingress_tls is True

    def test_load_empty_spec(self):
        spec = MattermostSpecSchema().load({})
        assert spec.image is None
        assert spec.ingress is None
        assert isinstance(spec.file_store, FileStore)
        assert isinstance(spec.database, Database)

    def test_invalid_label_value(self):
        with pytest.raises(ValidationError):
            MattermostSpecSchema().load({"resourceLabels": {"team": 1}})

    def test_invalid_replicas(self):
        with pytest.raises(ValidationError):
            MattermostSpecSchema().load({"replicas": "many"})

    def test_dump_uses_wire_keys(self):
        spec = MattermostSpec(
            image_pull_policy="IfNotPresent",
            ingress=Ingress(enabled=True, host="chat.example.com", tls_secret="cert"),
        )
        data = MattermostSpecSchema().dump(spec)
        assert data["imagePullPolicy"] == "IfNotPresent"
        assert data["ingress"]["tlsSecret"] == "cert"


class TestFileStore:
    """Tests for file store defaulting."""

    def test_defaults_to_operator_managed(self):
        file_store = FileStoreSchema().load({})
        file_store.set_defaults()
        assert isinstance(file_store.operator_managed, OperatorManagedMinio)
        assert file_store.operator_managed.storage_size == "50Gi"

    def test_keeps_storage_size(self):
        file_store = FileStoreSchema().load({"operatorManaged": {"storageSize": "1Ti"}})
        file_store.set_defaults()
        assert file_store.operator_managed.storage_size == "1Ti"

    def test_external_volume_not_defaulted(self):
        file_store = FileStore(
            external_volume=ExternalVolumeFileStore(volume_claim_name="mm-data")
        )
        file_store.set_defaults()
        assert file_store.operator_managed is None


class TestDatabase:
    """Tests for database defaulting."""

    def test_defaults_to_operator_managed(self):
        database = DatabaseSchema().load({})
        database.set_defaults()
        assert isinstance(database.operator_managed, OperatorManagedDatabase)
        assert database.operator_managed.type == "mysql"
        assert database.operator_managed.storage_size == "50Gi"

    def test_keeps_explicit_type(self):
        database = DatabaseSchema().load({"operatorManaged": {"type": "postgres"}})
        database.set_defaults()
        assert database.operator_managed.type == "postgres"

    def test_external_not_defaulted(self):
        database = DatabaseSchema().load({"external": {"secret": "db"}})
        database.set_defaults()
        assert database.operator_managed is None

    def test_custom_defaults(self):
        database = Database()
        database.set_defaults(DEFAULTS._replace(database_type="postgres"))
        assert database.operator_managed.type == "postgres"


class TestSettings:
    def test_default_settings(self):
        settings = Settings()
        assert settings.defaults == DEFAULTS
        assert settings.defaults.pull_policy == "IfNotPresent"

    def test_override_settings(self):
        defaults = MattermostDefaults(
            image="img",
            version="1.0.0",
            pull_policy="Never",
            filestore_storage_size="1Gi",
            database_type="postgres",
            database_storage_size="2Gi",
        )
        settings = Settings(defaults=defaults, write_back_defaults=False)
        assert settings.defaults is defaults
        assert settings.write_back_defaults is False
        assert Settings().defaults == DEFAULTS

    def test_defaults_are_immutable(self):
        with pytest.raises(AttributeError):
            DEFAULTS.image = "other"

    def test_defaults_from_environment_stay_strings(self, monkeypatch):
        monkeypatch.setenv("DEFAULT_MATTERMOST_VERSION", "1")
        monkeypatch.setenv("DEFAULT_DATABASE_TYPE", "yes")
        monkeypatch.setenv("DEFAULT_PULL_POLICY", "Always")
        defaults = load_defaults()
        assert defaults.version == "1"
        assert defaults.database_type == "yes"
        assert defaults.pull_policy == "Always"
        assert defaults.image == "mattermost/mattermost-enterprise-edition"

    def test_defaults_without_environment(self, monkeypatch):
        monkeypatch.delenv("DEFAULT_MATTERMOST_VERSION", raising=False)
        monkeypatch.delenv("DEFAULT_FILESTORE_STORAGE_SIZE", raising=False)
        defaults = load_defaults()
        assert defaults.version == "5.37.1"
        assert defaults.filestore_storage_size == "50Gi"
