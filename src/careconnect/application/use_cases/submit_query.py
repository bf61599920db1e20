"""Submit a symptom query and attach triage guidance."""

import logging

from ...core.config import get_settings
from ...domain.entities.health_query import HealthQuery
from ...domain.enums.workflow import RequestStatus
from ...domain.errors import InvalidRequestDataError
from ...domain.value_objects.record_id import RecordId
from ..dto.request_dto import SubmitQueryRequest, SubmitQueryResponse
from ..ports.repositories.doctor_repo import DoctorRepository
from ..ports.repositories.query_repo import HealthQueryRepository
from ..triage.guidance import build_guidance

logger = logging.getLogger(__name__)


class SubmitQueryUseCase:
    """Validate a query, run triage against the registry and store it as Pending."""

    def __init__(
        self, query_repository: HealthQueryRepository, doctor_repository: DoctorRepository
    ):
        self._query_repository = query_repository
        self._doctor_repository = doctor_repository

    async def execute(self, request: SubmitQueryRequest) -> SubmitQueryResponse:
        if request.age is None:
            raise InvalidRequestDataError("age", "Age is required")
        if not request.symptoms or not request.symptoms.strip():
            raise InvalidRequestDataError("symptoms", "Symptoms are required")

        registry = await self._doctor_repository.find_all()
        guidance = build_guidance(request.symptoms, registry)

        query = HealthQuery(
            query_id=RecordId.generate("q").value,
            user_id=request.user_id,
            patient_name=request.patient_name,
            age=request.age,
            gender=request.gender or None,
            category=request.category or get_settings().booking.default_query_category,
            symptoms=request.symptoms.strip(),
            status=RequestStatus.PENDING,
            advisory_text=guidance.advisory_text,
            advisory_kind=guidance.advisory_kind,
            urgency=guidance.urgency,
            assigned_doctor_id=guidance.suggested_doctor_id,
        )
        saved = await self._query_repository.save(query)

        logger.info(
            "Query %s stored: urgency=%s suggested_doctor=%s",
            saved.query_id,
            guidance.urgency.value,
            guidance.suggested_doctor_id,
        )
        return SubmitQueryResponse(query=saved, guidance=guidance)
