"""CloudFront cache invalidation."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Sequence

from botocore.exceptions import ClientError, WaiterError

from frontweb.core.exceptions import InvalidationError

logger = logging.getLogger(__name__)

ALL_PATHS = ("/*",)


def invalidate_distribution(
    client: Any,
    distribution_id: str,
    paths: Sequence[str] = ALL_PATHS,
    *,
    wait: bool = False,
    caller_reference: str | None = None,
) -> str:
    """Invalidate ``paths`` on the distribution and return the invalidation id."""
    if not distribution_id:
        raise InvalidationError("No distribution id given (set DISTRIBUTION_ID)")
    if not paths:
        raise InvalidationError("At least one path is required")

    reference = caller_reference or f"frontweb-{distribution_id}-{datetime.now().timestamp()}"
    try:
        resp = client.create_invalidation(
            DistributionId=distribution_id,
            InvalidationBatch={
                "Paths": {"Quantity": len(paths), "Items": list(paths)},
                "CallerReference": reference,
            },
        )
        invalidation_id = resp["Invalidation"]["Id"]
        logger.info("Created invalidation %s on %s for %s", invalidation_id, distribution_id, list(paths))

        if wait:
            logger.info("Waiting for invalidation %s to complete", invalidation_id)
            client.get_waiter("invalidation_completed").wait(
                DistributionId=distribution_id, Id=invalidation_id
            )
        return invalidation_id
    except (ClientError, WaiterError) as exc:
        raise InvalidationError(f"Invalidation of {distribution_id} failed: {exc}") from exc
