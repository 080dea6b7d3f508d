"""Redis mapping store adapter."""

from bigcoin_bot.adapters.redis_store.redis_mapping_store import RedisMappingStore, resource_key

__all__ = ["RedisMappingStore", "resource_key"]
