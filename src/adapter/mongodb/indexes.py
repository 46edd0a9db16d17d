"""MongoDB index management utilities.

Shared index creation with conflict resolution, used by each MongoXxxRepository.
"""

from logging import getLogger

from pymongo.errors import PyMongoError

logger = getLogger(__name__)


def create_index_safe(collection, keys: list, name: str, **kwargs) -> bool:
    """Create index, replacing an existing one that clashes by name or keys."""
    try:
        collection.create_index(keys, name=name, **kwargs)
        return True
    except PyMongoError as e:
        if "already exists" not in str(e) and "Conflict" not in str(e):
            raise
        return _resolve_conflict(collection, keys, name, **kwargs)


def _resolve_conflict(collection, keys: list, name: str, **kwargs) -> bool:
    keys_dict = dict(keys)

    for idx_name, idx_info in collection.index_information().items():
        if idx_name == '_id_':
            continue

        same_name = idx_name == name
        same_keys = dict(idx_info.get('key', [])) == keys_dict

        if same_name or same_keys:
            logger.warning(f"Dropping conflicting index: {idx_name}")
            collection.drop_index(idx_name)
            collection.create_index(keys, name=name, **kwargs)
            logger.info(f"Recreated index: {name}")
            return True

    logger.error(f"Failed to resolve index conflict for {name}")
    return False


def ensure_all_indexes(db) -> bool:
    """Ensure indexes for users and appointments. Called at app startup."""
    from adapter.mongodb.appointment_repository import MongoAppointmentRepository
    from adapter.mongodb.user_repository import MongoUserRepository

    results = [
        MongoUserRepository(db).ensure_indexes(),
        MongoAppointmentRepository(db).ensure_indexes(),
    ]
    return all(results)
