import pytest

from folio.core.exceptions import DuplicateProviderError, UnknownProviderError
from folio.core.ports import DataProvider, DataProviderLookup
from folio.providers.builtin import StaticDataProvider
from folio.providers.manager import DataProviderManager


def test_register_and_lookup():
    provider = StaticDataProvider(["a"])
    manager = DataProviderManager()
    manager.register("posts", provider)

    assert manager.data_provider("posts") is provider
    assert "posts" in manager
    assert manager.names() == ["posts"]
    assert list(manager) == ["posts"]


def test_unknown_provider_lists_available_names():
    manager = DataProviderManager({"tags": StaticDataProvider(), "posts": StaticDataProvider()})

    with pytest.raises(UnknownProviderError, match="Available providers: posts, tags"):
        manager.data_provider("pages")


def test_duplicate_registration_requires_replace():
    manager = DataProviderManager({"posts": StaticDataProvider()})
    replacement = StaticDataProvider(["b"])

    with pytest.raises(DuplicateProviderError):
        manager.register("posts", replacement)

    manager.register("posts", replacement, replace=True)
    assert manager.data_provider("posts") is replacement


def test_satisfies_ports():
    assert isinstance(DataProviderManager(), DataProviderLookup)
    assert isinstance(StaticDataProvider(), DataProvider)
