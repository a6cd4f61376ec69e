"""Subjects used on the data hub message bus and helpers to parse them."""

from __future__ import annotations

VERSION_PREFIX = "v1"
LOCATION_PREFIX = "loc"

_BASE = f"{VERSION_PREFIX}.{LOCATION_PREFIX}"
_REGISTRY_PROVIDERS = f"{_BASE}.registry.providers"

_PROVIDER_ID_INDEX = 2
_REGISTRY_PROVIDER_ID_INDEX = 4


class NoProviderInSubjectError(ValueError):
    """Raised when a subject does not carry a provider id."""

    def __init__(self, subject: str) -> None:
        super().__init__(f"NoProviderInSubject: {subject!r}")
        self.subject = subject


def vars_changed_event(provider_id: str) -> str:
    """Subject that reports variable value changes of a provider."""
    return f"{_BASE}.{provider_id}.vars.evt.changed"


def read_variables_query(provider_id: str) -> str:
    """Subject to read variables from a provider."""
    return f"{_BASE}.{provider_id}.vars.qry.read"


def write_variables_command(provider_id: str) -> str:
    """Subject to write variables of a provider."""
    return f"{_BASE}.{provider_id}.vars.cmd.write"


def provider_changed_event(provider_id: str) -> str:
    """Subject a provider uses to notify the registry about a changed definition."""
    return f"{_BASE}.{provider_id}.def.evt.changed"


def registry_provider_definition_read_query(provider_id: str) -> str:
    """Subject for reading a provider definition from the registry."""
    return f"{_REGISTRY_PROVIDERS}.{provider_id}.def.qry.read"


def registry_provider_definition_changed_event(provider_id: str) -> str:
    """Subject the registry uses to publish a provider's full changed definition."""
    return f"{_REGISTRY_PROVIDERS}.{provider_id}.def.evt.changed"


def registry_providers_read_query() -> str:
    """Subject for reading registered provider ids from the registry."""
    return f"{_REGISTRY_PROVIDERS}.qry.read"


def registry_providers_changed_event() -> str:
    """Subject notifying consumers about a changed provider id list."""
    return f"{_REGISTRY_PROVIDERS}.evt.changed"


def registry_state_changed_event() -> str:
    """Subject where the registry publishes its current state."""
    return f"{_BASE}.registry.state.evt.changed"


def get_provider_name_from_subject(subject: str) -> str | None:
    """Return the provider name in a subject, or None if there is none."""
    parts = subject.split(".")
    if len(parts) < 3:
        return None
    index = _REGISTRY_PROVIDER_ID_INDEX if "registry" in subject else _PROVIDER_ID_INDEX
    if index >= len(parts):
        return None
    return parts[index] or None


def _provider_id_index(parts: list[str]) -> int:
    if len(parts) >= 4 and parts[2] == "registry" and parts[3] == "providers":
        return _REGISTRY_PROVIDER_ID_INDEX
    return _PROVIDER_ID_INDEX


def get_provider_id_from_subject(subject: str) -> str:
    """Return the provider id in a subject.

    Raises NoProviderInSubjectError if the subject carries no provider id.
    """
    parts = subject.split(".")
    index = _provider_id_index(parts)
    if index >= len(parts) or not parts[index]:
        raise NoProviderInSubjectError(subject)
    return parts[index]