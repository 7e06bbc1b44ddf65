"""Tests for the manifest exposer."""

import pytest

from jarid.archive import JarArchive
from jarid.errors import ExposerFailure
from jarid.exposers.manifest import ManifestExposer, symbolic_name
from jarid.model.identity import Identity


class TestManifestExposer:

    def test_implementation_and_specification(self, handle_factory):
        handle = handle_factory(manifest={
            "Implementation-Title": "Commons Lang",
            "Implementation-Version": "2.6",
            "Implementation-Vendor": "The Apache Software Foundation",
            "Implementation-Vendor-Id": "org.apache",
            "Specification-Title": "Commons Lang Spec",
            "Specification-Version": "2.6",
            "Specification-Vendor": "Apache",
        })
        identity = Identity()

        ManifestExposer().expose(identity, handle)

        assert identity.potential_names == ["Commons Lang", "Commons Lang Spec"]
        assert identity.potential_versions == ["2.6", "2.6"]
        assert identity.potential_vendors == ["The Apache Software Foundation", "Apache"]
        assert identity.potential_group_ids == ["org.apache"]
        assert identity.is_empty()

    def test_bundle_attributes(self, handle_factory):
        handle = handle_factory(manifest={
            "Bundle-Name": "Apache Commons Lang",
            "Bundle-SymbolicName": "org.apache.commons.lang3;singleton:=true",
            "Bundle-Version": "3.12.0",
            "Bundle-Vendor": "The Apache Software Foundation",
        })
        identity = Identity()

        ManifestExposer().expose(identity, handle)

        assert identity.potential_names == ["Apache Commons Lang"]
        assert identity.potential_versions == ["3.12.0"]
        assert identity.potential_group_ids == ["org.apache.commons.lang3"]
        assert identity.potential_artifact_ids == ["lang3"]

    def test_automatic_module_name(self, handle_factory):
        identity = Identity()

        ManifestExposer().expose(identity, handle_factory(manifest={"Automatic-Module-Name": "org.example.core"}))

        assert identity.potential_group_ids == ["org.example.core"]

    def test_no_manifest(self, handle):
        identity = Identity()

        ManifestExposer().expose(identity, handle)

        assert identity.to_dict() == Identity().to_dict()

    def test_symbolic_name(self):
        assert symbolic_name("org.example;singleton:=true") == "org.example"
        assert symbolic_name("org.example") == "org.example"
        assert symbolic_name("") is None
        assert symbolic_name(None) is None

    def test_undecodable_manifest_raises(self, make_jar):
        path = make_jar("latin1-1.0.jar", {
            "META-INF/MANIFEST.MF": "Manifest-Version: 1.0\nImplementation-Vendor: Soci\xe9t\xe9 G\xe9n\xe9rale\n".encode("latin-1"),
        })

        with JarArchive(path) as archive:
            with pytest.raises(ExposerFailure, match="cannot read manifest") as excinfo:
                ManifestExposer().expose(Identity(), archive)

        assert excinfo.value.exposer == "manifest"
        assert excinfo.value.archive == str(path)
        assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)
