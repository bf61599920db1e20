"""
MongoDB implementation of HealthQueryRepository.
"""

from typing import List, Optional

from careconnect.application.ports.repositories.query_repo import HealthQueryRepository
from careconnect.domain.entities.health_query import HealthQuery
from careconnect.domain.enums.workflow import AdvisoryKind, RequestStatus, UrgencyTier

from ..models.query_m import HealthQueryMongo


def _enum_or_default(enum_cls, value, default):
    try:
        return enum_cls(value)
    except ValueError:
        return default


class MongoHealthQueryRepository(HealthQueryRepository):
    """MongoDB implementation of HealthQueryRepository."""

    async def save(self, query: HealthQuery) -> HealthQuery:
        query_mongo = await self._domain_to_mongo(query)
        await query_mongo.save()
        return self._mongo_to_domain(query_mongo)

    async def find_by_id(self, query_id: str) -> Optional[HealthQuery]:
        query_mongo = await HealthQueryMongo.find_one(HealthQueryMongo.query_id == query_id)
        if not query_mongo:
            return None
        return self._mongo_to_domain(query_mongo)

    async def find_all(self, category: Optional[str] = None) -> List[HealthQuery]:
        finder = (
            HealthQueryMongo.find(HealthQueryMongo.category == category)
            if category
            else HealthQueryMongo.find()
        )
        queries_mongo = await finder.sort([("created_at", -1)]).to_list()
        return [self._mongo_to_domain(q) for q in queries_mongo]

    async def find_by_user(self, user_id: str) -> List[HealthQuery]:
        queries_mongo = (
            await HealthQueryMongo.find(HealthQueryMongo.user_id == user_id)
            .sort([("created_at", -1)])
            .to_list()
        )
        return [self._mongo_to_domain(q) for q in queries_mongo]

    async def _domain_to_mongo(self, query: HealthQuery) -> HealthQueryMongo:
        """Convert domain entity to MongoDB model."""
        existing = await HealthQueryMongo.find_one(HealthQueryMongo.query_id == query.query_id)
        if existing:
            existing.status = query.status.value
            existing.category = query.category
            existing.advisory_text = query.advisory_text
            existing.advisory_kind = query.advisory_kind.value
            existing.urgency = query.urgency.value
            existing.assigned_doctor_id = query.assigned_doctor_id
            return existing

        return HealthQueryMongo(
            query_id=query.query_id,
            user_id=query.user_id,
            patient_name=query.patient_name,
            age=query.age,
            gender=query.gender,
            category=query.category,
            symptoms=query.symptoms,
            status=query.status.value,
            advisory_text=query.advisory_text,
            advisory_kind=query.advisory_kind.value,
            urgency=query.urgency.value,
            assigned_doctor_id=query.assigned_doctor_id,
            created_at=query.created_at,
        )

    def _mongo_to_domain(self, query_mongo: HealthQueryMongo) -> HealthQuery:
        """Convert MongoDB model to domain entity."""
        return HealthQuery(
            query_id=query_mongo.query_id,
            user_id=query_mongo.user_id,
            patient_name=query_mongo.patient_name,
            age=query_mongo.age,
            gender=query_mongo.gender,
            category=query_mongo.category,
            symptoms=query_mongo.symptoms,
            status=RequestStatus.from_stored(query_mongo.status),
            advisory_text=query_mongo.advisory_text or "",
            advisory_kind=_enum_or_default(AdvisoryKind, query_mongo.advisory_kind, AdvisoryKind.SUCCESS),
            urgency=_enum_or_default(UrgencyTier, query_mongo.urgency, UrgencyTier.NORMAL),
            assigned_doctor_id=query_mongo.assigned_doctor_id,
            created_at=query_mongo.created_at,
        )
