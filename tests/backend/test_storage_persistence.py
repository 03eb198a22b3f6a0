import asyncio
import logging

import pytest

from settings_lib.manager import SettingsManager
from settings_lib.backends.storage_backend import StoragePersistence
from settings_lib.storage.memory_storage import MemoryStorage
from settings_lib.storage.serializer import JSONSerializer, PickleSerializer, YAMLSerializer


class BrokenStorage:
    """Store whose writes and listings always fail."""

    def save(self, namespace, key, value):
        raise OSError("disk full")

    def load(self, namespace, key):
        raise KeyError(key)

    def list_keys(self, namespace):
        raise OSError("unreadable")


def test_settings_survive_into_new_manager():
    storage = MemoryStorage()
    first = SettingsManager(StoragePersistence(storage, serializer=JSONSerializer()))

    async def write():
        assert await first.set('guild:1', 'prefix', '!') is True
        assert await first.set('guild:2', 'lang', 'de') is True

    asyncio.run(write())
    assert sorted(storage.list_keys('settings')) == ['guild:1', 'guild:2']
    assert storage.load('settings', 'guild:1') == b'{"prefix": "!"}'

    second = SettingsManager(StoragePersistence(storage, serializer=JSONSerializer()))
    assert asyncio.run(second.init()) is True
    assert second.get('guild:1', 'prefix') == '!'
    assert second.get('guild:2', 'lang') == 'de'


def test_update_single_namespace_only_saves_that_namespace():
    storage = MemoryStorage()
    backend = StoragePersistence(storage)
    m = SettingsManager(backend)
    m.ensure('a')
    m.ensure('b')
    assert asyncio.run(m.update('a')) is True
    assert list(storage.list_keys('settings')) == ['a']
    assert asyncio.run(m.update()) is True
    assert sorted(storage.list_keys('settings')) == ['a', 'b']


def test_update_unknown_namespace_is_a_successful_noop():
    storage = MemoryStorage()
    m = SettingsManager(StoragePersistence(storage))
    assert asyncio.run(m.update('nope')) is True
    assert list(storage.list_keys('settings')) == []


def test_without_serializer_store_holds_a_copy():
    storage = MemoryStorage()
    m = SettingsManager(StoragePersistence(storage))
    asyncio.run(m.set('g', 'items', [1, 2]))
    m.settings['g']['items'].append(3)
    assert storage.load('settings', 'g') == {'items': [1, 2]}


def test_cleared_key_is_persisted_as_null():
    storage = MemoryStorage()
    m = SettingsManager(StoragePersistence(storage, serializer=YAMLSerializer()))
    asyncio.run(m.set('g', 'k', 'v'))
    asyncio.run(m.clear('g', 'k'))
    reloaded = SettingsManager(StoragePersistence(storage, serializer=YAMLSerializer()))
    asyncio.run(reloaded.init())
    assert reloaded.settings == {'g': {'k': None}}


def test_custom_storage_namespace():
    storage = MemoryStorage()
    m = SettingsManager(StoragePersistence(storage, storage_namespace='bot'))
    asyncio.run(m.set('g', 'k', 1))
    assert list(storage.list_keys('bot')) == ['g']
    assert list(storage.list_keys('settings')) == []


def test_extension_follows_serializer():
    assert SettingsManager(StoragePersistence(MemoryStorage())).extension == ''
    assert SettingsManager(StoragePersistence(MemoryStorage(), serializer=YAMLSerializer())).extension == '.yml'


def test_storage_failure_reports_false_and_keeps_cache(caplog):
    m = SettingsManager(StoragePersistence(BrokenStorage()))
    with caplog.at_level(logging.ERROR):
        assert asyncio.run(m.set('g', 'k', 'v')) is False
        assert asyncio.run(m.init()) is False
    assert m.get('g', 'k') == 'v'
    assert any('Failed to persist settings for g' in r.getMessage() for r in caplog.records)
    assert any('Failed to load settings' in r.getMessage() for r in caplog.records)


def test_corrupt_payload_fails_init():
    storage = MemoryStorage()
    storage.save('settings', 'g', b'not json')
    m = SettingsManager(StoragePersistence(storage, serializer=JSONSerializer()))
    assert asyncio.run(m.init()) is False


def test_failed_init_leaves_cache_untouched():
    storage = MemoryStorage()
    storage.save('settings', 'a', b'{"k": 1}')
    storage.save('settings', 'b', b'not json')
    m = SettingsManager(StoragePersistence(storage, serializer=JSONSerializer()))
    m.ensure('existing')
    assert asyncio.run(m.init()) is False
    assert m.settings == {'existing': {}}


def test_truncated_pickle_payload_fails_init():
    storage = MemoryStorage()
    storage.save('settings', 'g', b'')
    m = SettingsManager(StoragePersistence(storage, serializer=PickleSerializer()))
    assert asyncio.run(m.init()) is False
    assert m.settings == {}


def test_unpicklable_value_fails_update():
    def local_callback():
        pass

    storage = MemoryStorage()
    m = SettingsManager(StoragePersistence(storage, serializer=PickleSerializer()))
    assert asyncio.run(m.set('g', 'hook', local_callback)) is False
    assert m.get('g', 'hook') is local_callback
    assert list(storage.list_keys('settings')) == []


def test_non_mapping_payload_fails_init():
    storage = MemoryStorage()
    storage.save('settings', 'g', b'[1, 2]')
    m = SettingsManager(StoragePersistence(storage, serializer=JSONSerializer()))
    assert asyncio.run(m.init()) is False


def test_unserializable_value_fails_update():
    m = SettingsManager(StoragePersistence(MemoryStorage(), serializer=JSONSerializer()))
    assert asyncio.run(m.set('g', 'k', object())) is False
    assert m.get('g', 'k') is not None


def test_rejects_non_storage():
    with pytest.raises(TypeError):
        StoragePersistence(object())
