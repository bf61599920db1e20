"""
MongoDB implementation of UserRepository.
"""

from typing import Optional

from careconnect.application.ports.repositories.user_repo import UserRepository
from careconnect.domain.entities.user import User

from ..models.user_m import UserMongo


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository."""

    async def save(self, user: User) -> User:
        user_mongo = await UserMongo.find_one(UserMongo.user_id == user.user_id)
        if user_mongo:
            user_mongo.name = user.name
            user_mongo.email = user.email
            user_mongo.phone = user.phone
            user_mongo.password_hash = user.password_hash
            user_mongo.role = user.role.value
        else:
            user_mongo = UserMongo(
                user_id=user.user_id,
                name=user.name,
                email=user.email,
                phone=user.phone,
                password_hash=user.password_hash,
                role=user.role.value,
                created_at=user.created_at,
            )
        await user_mongo.save()
        return self._mongo_to_domain(user_mongo)

    async def find_by_id(self, user_id: str) -> Optional[User]:
        user_mongo = await UserMongo.find_one(UserMongo.user_id == user_id)
        return self._mongo_to_domain(user_mongo) if user_mongo else None

    async def find_by_email(self, email: str) -> Optional[User]:
        if not email:
            return None
        user_mongo = await UserMongo.find_one(UserMongo.email == email.strip().lower())
        return self._mongo_to_domain(user_mongo) if user_mongo else None

    def _mongo_to_domain(self, user_mongo: UserMongo) -> User:
        return User(
            user_id=user_mongo.user_id,
            name=user_mongo.name,
            email=user_mongo.email,
            phone=user_mongo.phone,
            password_hash=user_mongo.password_hash,
            role=user_mongo.role,
            created_at=user_mongo.created_at,
        )
