"""MongoDB implementation of UserRepository."""

from logging import getLogger
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError, PyMongoError
from adapter.mongodb import USERS_COLLECTION_NAME
from domain.model.errors import ConflictError, StorageError
from domain.model.user import User

logger = getLogger(__name__)


class MongoUserRepository:
    def __init__(self, db: Database):
        self.collection = db[USERS_COLLECTION_NAME]

    def ensure_indexes(self) -> bool:
        """Create indexes for users collection."""
        from adapter.mongodb.indexes import create_index_safe

        try:
            create_index_safe(self.collection, [('email', 1)], 'idx_users_email', unique=True)
            create_index_safe(self.collection, [('created_at', -1)], 'idx_users_created_at')
            return True
        except Exception as e:
            logger.error("Failed to create users indexes", extra={"error": str(e)})
            return False

    def _to_domain(self, doc: dict) -> User:
        """Convert MongoDB document to User domain model."""
        return User(
            id=doc['_id'],
            name=doc['name'],
            email=doc['email'],
            password_hash=doc['password_hash'],
            created_at=doc['created_at'],
            updated_at=doc['updated_at'],
        )

    def _to_document(self, user: User) -> dict:
        return {
            '_id': user.id,
            'name': user.name,
            'email': user.email,
            'password_hash': user.password_hash,
            'created_at': user.created_at,
            'updated_at': user.updated_at,
        }

    def create(self, name: str, email: str, password_hash: str) -> User:
        """Insert a new user; the unique email index rejects duplicates."""
        user = User.create(name=name, email=email, password_hash=password_hash)
        try:
            self.collection.insert_one(self._to_document(user))
        except DuplicateKeyError:
            logger.warning("User creation failed: email already exists", extra={"email": email})
            raise ConflictError("Email address already used.")
        except PyMongoError as e:
            logger.error("Failed to create user", extra={"email": email, "error": str(e)})
            raise StorageError("Failed to create user") from e

        logger.info("User created", extra={"userId": user.id, "email": email})
        return user

    def save(self, user: User) -> User:
        """Replace the stored document with the current state of `user`."""
        user.touch()
        try:
            self.collection.replace_one({'_id': user.id}, self._to_document(user), upsert=True)
        except DuplicateKeyError:
            logger.warning("User update failed: email already exists", extra={"userId": user.id})
            raise ConflictError("Email already in use.")
        except PyMongoError as e:
            logger.error("Failed to save user", extra={"userId": user.id, "error": str(e)})
            raise StorageError("Failed to save user") from e
        return user

    def find_by_email(self, email: str) -> User | None:
        """Find a user by email. Return User or None if not found."""
        return self._find_one({'email': email})

    def find_by_id(self, user_id: str) -> User | None:
        """Find a user by ID. Return User or None if not found."""
        return self._find_one({'_id': user_id})

    def find_all_providers(self, except_user_id: str | None = None) -> list[User]:
        query = {'_id': {'$ne': except_user_id}} if except_user_id else {}
        try:
            docs = self.collection.find(query).sort('name', 1)
            return [self._to_domain(doc) for doc in docs]
        except PyMongoError as e:
            logger.error("Failed to list providers", extra={"error": str(e)})
            raise StorageError("Failed to list providers") from e

    def _find_one(self, query: dict) -> User | None:
        try:
            doc = self.collection.find_one(query)
        except PyMongoError as e:
            logger.error("Failed to look up user", extra={"query": str(query), "error": str(e)})
            raise StorageError("Failed to look up user") from e
        return self._to_domain(doc) if doc else None
