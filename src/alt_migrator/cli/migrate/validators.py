"""Migrate-specific validators."""

from __future__ import annotations

from ..core.types import Result, Success, Failure
from ..core.validators import (
    validate_access_token,
    validate_concurrency,
    validate_instance_url,
    validate_outbox_path,
)
from .params import MigrateParams


def validate_migrate_params(params: MigrateParams) -> Result[MigrateParams]:
    """Validate all migrate parameters.

    The outbox path is checked first so a bad path fails before any
    network access is attempted.

    Returns Result with params if valid, or Failure with error.
    """
    outbox_result = validate_outbox_path(params.outbox)
    if isinstance(outbox_result, Failure):
        return outbox_result

    instance_result = validate_instance_url(params.instance)
    if isinstance(instance_result, Failure):
        return instance_result

    token_result = validate_access_token(params.access_token)
    if isinstance(token_result, Failure):
        return token_result

    concurrency_result = validate_concurrency(params.concurrency)
    if isinstance(concurrency_result, Failure):
        return concurrency_result

    return Success(params)
