"""Update checker engine — compare declared CDN versions with registry latest."""

from checklib.engines.update_checker.checker import check_all, check_one, iter_outcomes
from checklib.engines.update_checker.http_client import RegistryHttpClient
from checklib.engines.update_checker.models import OutcomeStatus, UpdateOutcome

__all__ = [
    "OutcomeStatus",
    "RegistryHttpClient",
    "UpdateOutcome",
    "check_all",
    "check_one",
    "iter_outcomes",
]
