"""Pytest configuration and fixtures for jarid tests."""

import zipfile
from pathlib import Path
from typing import Callable, Dict, Optional

import pytest

from jarid.model.identity import Identity


class InMemoryHandle:
    """Archive handle holding entries in a dict, for exposer and resolver tests."""

    def __init__(self, path: str = "example.jar", entries: Optional[Dict[str, str]] = None,
                 manifest: Optional[Dict[str, str]] = None):
        self.path = Path(path)
        self.entries = entries or {}
        self.manifest = manifest or {}
        self.identity: Optional[Identity] = None
        self.set_calls = 0

    def get_cached_identity(self) -> Optional[Identity]:
        return self.identity

    def set_cached_identity(self, identity: Identity) -> None:
        self.set_calls += 1
        self.identity = identity

    def entry_names(self):
        return list(self.entries)

    def read_text(self, name: str) -> str:
        return self.entries[name]

    def manifest_attributes(self) -> Dict[str, str]:
        return self.manifest


@pytest.fixture
def handle() -> InMemoryHandle:
    """Empty in-memory archive handle."""
    return InMemoryHandle()


@pytest.fixture
def handle_factory() -> Callable[..., InMemoryHandle]:
    """Build in-memory handles with the given entries."""
    return InMemoryHandle


@pytest.fixture
def make_jar(tmp_path) -> Callable[..., Path]:
    """Write a jar with the given text entries and return its path."""

    def _make_jar(filename: str = "example-1.0.jar", entries: Optional[Dict[str, str]] = None) -> Path:
        path = tmp_path / filename
        with zipfile.ZipFile(path, "w") as jar:
            for name, content in (entries or {}).items():
                jar.writestr(name, content)
        return path

    return _make_jar


@pytest.fixture
def commons_lang_entries() -> Dict[str, str]:
    """Entries of a typical Maven-built jar."""
    return {
        "META-INF/MANIFEST.MF": (
            "Manifest-Version: 1.0\n"
            "Implementation-Title: Commons Lang\n"
            "Implementation-Vendor: The Apache Software Foundation\n"
            "Implementation-Vendor-Id: org.apache\n"
            "Implementation-Version: 2.6\n"
            "Specification-Title: Commons Lang\n"
            "Specification-Vendor: The Apache Software Foundation\n"
            "Specification-Version: 2.6\n"
            "\n"
        ),
        "META-INF/maven/commons-lang/commons-lang/pom.properties": (
            "#Generated by Maven\n"
            "version=2.6\n"
            "groupId=commons-lang\n"
            "artifactId=commons-lang\n"
        ),
        "org/apache/commons/lang/StringUtils.class": "",
        "org/apache/commons/lang/math/NumberUtils.class": "",
    }
