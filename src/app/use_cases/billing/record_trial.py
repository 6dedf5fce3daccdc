"""RecordTrial Use Case

Records a trial session for a project and prices it with the trial
tiering policy (free quota per project, flat price afterwards).
"""

import logging
from decimal import Decimal
from typing import Union
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.project_repository import ProjectRepository
from src.app.repositories.trial_repository import TrialRepository
from src.app.use_cases.authorization import authorize
from src.domain.trial import Trial
from src.domain.trial_pricing import EXTRA_TRIAL_COST, FREE_TRIALS_PER_PROJECT, price_trial
from .dtos import RecordTrialCommandDTO, TrialResponseDTO, to_trial_response

logger = logging.getLogger(__name__)


class RecordTrial:
    """
    Use Case: Record a trial session

    Business Rules:
    1. Project must belong to the user (else PROJECT_NOT_FOUND)
    2. The first free_quota trials of a project cost 0 (is_extra=False)
    3. Every later trial costs extra_cost (is_extra=True)
    4. Count-then-insert runs under a project row lock so concurrent
       calls cannot both take the last free slot

    Flow:
    1. Load project with lock (SELECT FOR UPDATE)
    2. Count existing trials
    3. Price the new trial
    4. Create trial record
    5. Commit transaction
    """

    def __init__(
        self,
        uow: UnitOfWork,
        project_repo: ProjectRepository,
        trial_repo: TrialRepository,
        free_quota: int = FREE_TRIALS_PER_PROJECT,
        extra_cost: Union[Decimal, str] = EXTRA_TRIAL_COST,
    ):
        self.uow = uow
        self.project_repo = project_repo
        self.trial_repo = trial_repo
        self.free_quota = free_quota
        self.extra_cost = Decimal(extra_cost)

    async def execute(self, user_id: str, command: RecordTrialCommandDTO) -> Result[TrialResponseDTO]:
        """
        Execute trial recording

        Args:
            user_id: Calling user
            command: RecordTrialCommandDTO with project_id and notes

        Returns:
            Result[TrialResponseDTO]: Created trial with derived cost
        """
        try:
            # Step 1: Lock project row
            project = await self.project_repo.get_by_id(command.project_id, for_update=True)
            authorized = authorize(project, user_id, "project")
            if authorized.is_err():
                await self.uow.rollback()
                return authorized

            # Step 2: Count prior trials
            existing_trials = await self.trial_repo.count_by_project_id(project.id)

            # Step 3: Price the new trial
            price = price_trial(existing_trials, self.free_quota, self.extra_cost)

            # Step 4: Create immutable trial record
            trial = Trial(
                user_id=user_id,
                project_id=project.id,
                notes=command.notes,
                cost=price.cost,
                is_extra=price.is_extra,
            )
            created_trial = await self.trial_repo.create(trial)

            # Step 5: Commit transaction
            await self.uow.commit()

            if price.is_extra:
                logger.info(
                    f"Extra trial #{existing_trials + 1} recorded for project {project.id} "
                    f"(cost={price.cost})"
                )

            return Return.ok(to_trial_response(created_trial))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to record trial for project {command.project_id}: {e}")
            return Return.err(
                Error(
                    code="RECORD_TRIAL_FAILED",
                    message="Failed to record trial",
                    reason=str(e),
                )
            )
