"""Identify real jar files with the bundled exposers."""

from jarid.archive import JarArchive
from jarid.config import ResolverConfig
from jarid.resolver import IdentityResolver


class TestDefaultResolver:

    def test_maven_built_jar(self, make_jar, commons_lang_entries):
        path = make_jar("commons-lang-2.6.jar", commons_lang_entries)
        resolver = IdentityResolver.from_config(ResolverConfig())

        with JarArchive(path) as archive:
            identity = resolver.analyze(archive)
            assert resolver.analyze(archive) is identity

        assert identity.coordinates == "commons-lang:commons-lang:2.6"
        assert identity.vendor == "The Apache Software Foundation"
        # equal length: the file name candidate came first
        assert identity.name == "commons-lang"
        assert identity.potential_group_ids == [
            "org.apache",
            "commons-lang",
            "org.apache.commons.lang",
            "org.apache.commons.lang.math",
        ]

    def test_jar_without_maven_metadata(self, make_jar):
        path = make_jar("example-core-1.0.jar", {
            "org/example/core/Engine.class": "",
            "org/example/Api.class": "",
        })
        resolver = IdentityResolver.from_config(ResolverConfig())

        with JarArchive(path) as archive:
            identity = resolver.analyze(archive)

        assert identity.group_id == "org.example"
        assert identity.artifact_id == "example-core"
        assert identity.version == "1.0"
        assert identity.vendor is None

    def test_shaded_jar_falls_back_to_candidates(self, make_jar):
        path = make_jar("app-bundle.jar", {
            "META-INF/maven/org.example/app/pom.properties": "groupId=org.example\nartifactId=app\nversion=3.0.1\n",
            "META-INF/maven/io.netty/netty-common/pom.properties": "groupId=io.netty\nartifactId=netty-common\nversion=4.1.100.Final\n",
        })
        resolver = IdentityResolver.from_config(ResolverConfig(exposers=["pom_properties", "filename"]))

        with JarArchive(path) as archive:
            identity = resolver.analyze(archive)

        assert identity.group_id == "io.netty"
        assert identity.artifact_id == "netty-common"
        assert identity.version == "3.0.1"
