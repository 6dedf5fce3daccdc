"""Trial pricing policy

Each project gets a fixed number of free trial sessions; every session
beyond the quota is charged a flat price. No decay, no reset.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Union

FREE_TRIALS_PER_PROJECT = 3
EXTRA_TRIAL_COST = Decimal("10.00")


@dataclass(frozen=True)
class TrialPrice:
    cost: Decimal
    is_extra: bool


def price_trial(
    existing_trials: int,
    free_quota: int = FREE_TRIALS_PER_PROJECT,
    extra_cost: Union[Decimal, str] = EXTRA_TRIAL_COST,
) -> TrialPrice:
    """
    Price the next trial of a project

    Args:
        existing_trials: Trials already recorded for the project
        free_quota: Number of free trials per project
        extra_cost: Flat price of each trial past the quota

    Returns:
        TrialPrice with cost and is_extra flag
    """
    if existing_trials < 0:
        raise ValueError("existing_trials must be >= 0")

    if existing_trials < free_quota:
        return TrialPrice(cost=Decimal("0"), is_extra=False)

    return TrialPrice(cost=Decimal(extra_cost), is_extra=True)
